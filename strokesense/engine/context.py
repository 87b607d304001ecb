"""StrokeContext — the single mutable state object flowing through all transforms.

Transforms write their metric into the typed fields below; the frozen
ShapeMetrics / RecognitionResult snapshots are built from it once the
pipeline has finished.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from strokesense.engine.config import RecognizerConfig
from strokesense.utils.geometry import BoundingBox

Point = tuple[float, float]


class ShapeLabel(str, enum.Enum):
    TRIANGLE = "Triangle"
    SQUARE = "Square"
    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ShapeMetrics:
    bounding_box: BoundingBox
    aspect_ratio: float
    perimeter: float
    area: float
    circularity: float
    corner_count: int


@dataclass(frozen=True)
class RecognitionResult:
    label: ShapeLabel
    metrics: ShapeMetrics
    # Simplified polyline vertices, for corner-marker display
    corners: tuple[Point, ...] = ()

    @property
    def display_text(self) -> str:
        return f"Shape: {self.label.value}"


@dataclass
class StrokeContext:
    """Per-stroke state shared by the transforms of one recognition call."""

    # Stroke points: Nx2 array of (x, y)
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    config: RecognizerConfig = field(default_factory=RecognizerConfig)

    # --- Layer 0: raw geometry ---
    bounding_box: BoundingBox | None = None
    aspect_ratio: float = 0.0
    perimeter: float = 0.0
    area: float = 0.0

    # --- Layer 1: shape analysis ---
    circularity: float = 0.0
    corner_count: int = 0
    corners: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))

    # --- Layer 2: classification ---
    label: ShapeLabel | None = None

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_points(self) -> int:
        return len(self.points)

    def metrics(self) -> ShapeMetrics:
        if self.bounding_box is None:
            raise ValueError("bounding box has not been computed")
        return ShapeMetrics(
            bounding_box=self.bounding_box,
            aspect_ratio=self.aspect_ratio,
            perimeter=self.perimeter,
            area=self.area,
            circularity=self.circularity,
            corner_count=self.corner_count,
        )

    def result(self) -> RecognitionResult:
        if self.label is None:
            raise ValueError("stroke has not been classified")
        return RecognitionResult(
            label=self.label,
            metrics=self.metrics(),
            corners=tuple((float(x), float(y)) for x, y in self.corners),
        )
