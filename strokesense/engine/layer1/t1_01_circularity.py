"""T1.01 — Circularity. ★

C = 4π·area/perimeter². Circle=1.0.
"""

from __future__ import annotations

from strokesense.engine.context import StrokeContext
from strokesense.engine.registry import Layer, transform
from strokesense.utils.geometry import circularity as circularity_ratio


@transform(
    id="T1.01",
    layer=Layer.SHAPE_ANALYSIS,
    dependencies=["T0.02", "T0.03"],
    description="Compute circularity (4π·area/perimeter²)",
)
def circularity(ctx: StrokeContext) -> None:
    ctx.circularity = circularity_ratio(ctx.area, ctx.perimeter)
