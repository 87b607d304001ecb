"""T0.03 — Shoelace Area. ★★

Area of the stroke treated as a closed ring, measured on a downsampled copy
(every area_stride-th point plus the last) to keep long strokes cheap.
"""

from __future__ import annotations

from strokesense.engine.context import StrokeContext
from strokesense.engine.registry import Layer, transform
from strokesense.utils.geometry import downsample, shoelace_area


@transform(
    id="T0.03",
    layer=Layer.GEOMETRY,
    description="Compute shoelace area on downsampled stroke",
)
def polygon_area(ctx: StrokeContext) -> None:
    pts = downsample(ctx.points, ctx.config.area_stride)
    ctx.area = shoelace_area(pts)
