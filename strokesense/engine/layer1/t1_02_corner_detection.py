"""T1.02 — Corner Detection (Douglas-Peucker). ★★

Simplify the stroke with tolerance epsilon; the retained vertices are the
corners and their count minus one is the corner count (a closed stroke
repeats its start point at the end).
"""

from __future__ import annotations

import logging

from strokesense.engine.context import StrokeContext
from strokesense.engine.registry import Layer, transform
from strokesense.utils.simplify import douglas_peucker

logger = logging.getLogger(__name__)


@transform(
    id="T1.02",
    layer=Layer.SHAPE_ANALYSIS,
    description="Detect corners via Douglas-Peucker simplification",
)
def corner_detection(ctx: StrokeContext) -> None:
    corners = douglas_peucker(ctx.points, ctx.config.epsilon)
    ctx.corners = corners
    ctx.corner_count = max(len(corners) - 1, 0)
    logger.debug("Detected %d corners using shape simplification", ctx.corner_count)
