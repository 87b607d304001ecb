"""GestureSession — caller-side pointer lifecycle around recognize().

Pointer down -> begin(), pointer held -> add_point(), pointer up -> end().
The session owns the in-progress stroke and the corners of the last result,
so several sessions (one per canvas, say) never share marker state.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from strokesense.engine.config import RecognizerConfig
from strokesense.engine.context import Point, RecognitionResult
from strokesense.engine.recognizer import recognize
from strokesense.errors import StrokeSenseError

logger = logging.getLogger(__name__)


class GestureSession:
    def __init__(
        self,
        config: RecognizerConfig | None = None,
        on_result: Callable[[RecognitionResult], None] | None = None,
        on_clear: Callable[[], None] | None = None,
    ) -> None:
        self.config = config or RecognizerConfig()
        self.on_result = on_result
        self.on_clear = on_clear
        self.is_drawing = False
        self.last_result: RecognitionResult | None = None
        self._points: list[Point] = []
        self._corners: tuple[Point, ...] = ()

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def corners(self) -> tuple[Point, ...]:
        return self._corners

    def begin(self) -> None:
        """Start a new stroke, dropping the previous one and its corners."""
        self._points.clear()
        self._clear_corners()
        self.is_drawing = True

    def add_point(self, x: float, y: float) -> None:
        if not self.is_drawing:
            return
        self._points.append((float(x), float(y)))

    def end(self) -> RecognitionResult | None:
        """Freeze the stroke and classify it.

        Returns None when nothing was being drawn or the stroke is too short.
        If recognition raises, the rejected stroke is discarded before the
        error propagates.
        """
        if not self.is_drawing:
            return None
        self.is_drawing = False
        if not self._points:
            logger.debug("Gesture ended without points")
            self.last_result = None
            return None

        try:
            result = recognize(np.asarray(self._points), self.config)
        except StrokeSenseError:
            logger.debug("Discarding rejected stroke of %d points", len(self._points))
            self._points.clear()
            self.last_result = None
            raise
        self.last_result = result
        if result is None:
            return None
        self._corners = result.corners
        if self.on_result is not None:
            self.on_result(result)
        return result

    def close(self) -> None:
        """Drop any in-progress stroke and clear displayed corners."""
        self.is_drawing = False
        self._points.clear()
        self._clear_corners()

    def _clear_corners(self) -> None:
        self._corners = ()
        if self.on_clear is not None:
            self.on_clear()
