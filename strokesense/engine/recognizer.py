"""recognize() — the single entry point from a finished stroke to a shape label."""

from __future__ import annotations

import logging
from typing import Callable

from numpy.typing import ArrayLike

from strokesense.engine.config import RecognizerConfig
from strokesense.engine.context import RecognitionResult, StrokeContext
from strokesense.engine.pipeline import Pipeline, create_pipeline
from strokesense.engine.registry import load_transforms
from strokesense.errors import InvalidInputError, RecognitionError
from strokesense.utils.geometry import as_points, resample

logger = logging.getLogger(__name__)

load_transforms()


def recognize(
    stroke: ArrayLike,
    config: RecognizerConfig | None = None,
    on_result: Callable[[RecognitionResult], None] | None = None,
    pipeline: Pipeline | None = None,
) -> RecognitionResult | None:
    """Classify one finished stroke.

    Returns None (and skips on_result) when the stroke has fewer than
    config.min_points_for_classification points. An empty stroke raises
    InvalidInputError; a failing transform raises RecognitionError.
    """
    config = config or RecognizerConfig()
    points = as_points(stroke)
    if len(points) == 0:
        raise InvalidInputError("stroke has no points")
    if len(points) < config.min_points_for_classification:
        logger.debug(
            "Stroke too short to classify (%d < %d points)",
            len(points),
            config.min_points_for_classification,
        )
        return None

    if len(points) > config.max_points:
        logger.debug("Resampling stroke from %d to %d points", len(points), config.max_points)
        points = resample(points, config.max_points)

    ctx = StrokeContext(points=points, config=config)
    ctx = (pipeline or create_pipeline()).run(ctx)
    if ctx.errors:
        raise RecognitionError(ctx.errors)

    result = ctx.result()
    logger.info(
        "Recognized shape: %s (corners: %d, circularity: %.2f)",
        result.label.value,
        result.metrics.corner_count,
        result.metrics.circularity,
    )
    if on_result is not None:
        on_result(result)
    return result
