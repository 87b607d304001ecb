"""API response models."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from strokesense import __version__
from strokesense.engine.context import RecognitionResult, ShapeMetrics


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    transforms_registered: int = 0


class BoundingBoxModel(BaseModel):
    min_x: float
    min_y: float
    width: float
    height: float


class MetricsModel(BaseModel):
    bounding_box: BoundingBoxModel
    # None when the bounding box has zero height
    aspect_ratio: float | None = None
    perimeter: float = 0.0
    area: float = 0.0
    circularity: float = 0.0
    corner_count: int = 0

    @classmethod
    def from_metrics(cls, metrics: ShapeMetrics) -> MetricsModel:
        box = metrics.bounding_box
        aspect = metrics.aspect_ratio
        return cls(
            bounding_box=BoundingBoxModel(
                min_x=box.min_x, min_y=box.min_y, width=box.width, height=box.height
            ),
            aspect_ratio=aspect if math.isfinite(aspect) else None,
            perimeter=round(metrics.perimeter, 2),
            area=round(metrics.area, 2),
            circularity=round(metrics.circularity, 4),
            corner_count=metrics.corner_count,
        )


class RecognizeResponse(BaseModel):
    recognized: bool = False
    label: str | None = None
    display_text: str | None = None
    metrics: MetricsModel | None = None
    corners: list[tuple[float, float]] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @classmethod
    def from_result(cls, result: RecognitionResult | None, elapsed_ms: float) -> RecognizeResponse:
        if result is None:
            return cls(processing_time_ms=elapsed_ms)
        return cls(
            recognized=True,
            label=result.label.value,
            display_text=result.display_text,
            metrics=MetricsModel.from_metrics(result.metrics),
            corners=list(result.corners),
            processing_time_ms=elapsed_ms,
        )
