"""T2.01 — Shape Classification. ★★★

First matching rule wins:
  corners == 3 OR (2 <= corners <= 4 AND circularity < 0.6)   → Triangle
  corners == 4 OR 3 <= corners <= 5                           → Square if 0.8 < aspect < 1.2
                                                                else Rectangle
  circularity > 0.7                                           → Circle
  ELSE                                                        → Unknown

The corner ranges of the first two rules overlap; order decides. A flat
(zero width or height) bounding box never reaches the Square/Rectangle rule.
"""

from __future__ import annotations

from strokesense.engine.context import ShapeLabel, ShapeMetrics, StrokeContext
from strokesense.engine.registry import Layer, transform

# Below this a 2-4 vertex outline reads as a triangle rather than a quad.
_CIRC_TRIANGLE_MAX = 0.6
_CIRC_CIRCLE_MIN = 0.7
_ASPECT_SQUARE_LO = 0.8
_ASPECT_SQUARE_HI = 1.2


def classify(metrics: ShapeMetrics) -> ShapeLabel:
    corners = metrics.corner_count
    circ = metrics.circularity

    if corners == 3 or (2 <= corners <= 4 and circ < _CIRC_TRIANGLE_MAX):
        return ShapeLabel.TRIANGLE
    if (corners == 4 or 3 <= corners <= 5) and not metrics.bounding_box.is_degenerate:
        if _ASPECT_SQUARE_LO < metrics.aspect_ratio < _ASPECT_SQUARE_HI:
            return ShapeLabel.SQUARE
        return ShapeLabel.RECTANGLE
    if circ > _CIRC_CIRCLE_MIN:
        return ShapeLabel.CIRCLE
    return ShapeLabel.UNKNOWN


@transform(
    id="T2.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["T0.01", "T1.01", "T1.02"],
    description="Label shape (triangle/square/rectangle/circle/unknown)",
)
def shape_classification(ctx: StrokeContext) -> None:
    ctx.label = classify(ctx.metrics())
