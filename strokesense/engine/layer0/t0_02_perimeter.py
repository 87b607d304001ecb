"""T0.02 — Closed Perimeter. ★★★

Sum of consecutive distances plus the closing segment back to the first
point, whether or not the user visually closed the stroke.
"""

from __future__ import annotations

from strokesense.engine.context import StrokeContext
from strokesense.engine.registry import Layer, transform
from strokesense.utils.geometry import downsample, perimeter


@transform(
    id="T0.02",
    layer=Layer.GEOMETRY,
    description="Compute closed perimeter",
)
def closed_perimeter(ctx: StrokeContext) -> None:
    pts = downsample(ctx.points, ctx.config.perimeter_stride)
    ctx.perimeter = perimeter(pts)
