"""T0.01 — Bounding Box & Aspect Ratio. ★★★

Min/max reduction over x and y; aspect = width / height.
A flat stroke gets aspect inf (or 0.0 for a single location), never NaN.
"""

from __future__ import annotations

from strokesense.engine.context import StrokeContext
from strokesense.engine.registry import Layer, transform
from strokesense.utils.geometry import aspect_ratio, bounding_box


@transform(
    id="T0.01",
    layer=Layer.GEOMETRY,
    description="Compute bounding box and aspect ratio",
)
def bounding_box_props(ctx: StrokeContext) -> None:
    box = bounding_box(ctx.points)
    ctx.bounding_box = box
    ctx.aspect_ratio = aspect_ratio(box)
