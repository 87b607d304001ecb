"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RecognizeRequest(BaseModel):
    points: list[tuple[float, float]] = Field(
        ...,
        description="Time-ordered stroke points as [x, y] pairs",
    )
    epsilon: float | None = Field(
        default=None,
        gt=0,
        description="Corner simplification tolerance (defaults to server setting)",
    )
    area_stride: int | None = Field(default=None, ge=1, description="Downsample stride for area")
    perimeter_stride: int | None = Field(
        default=None, ge=1, description="Downsample stride for perimeter"
    )
