"""Tests for the rule-order shape classifier."""

import pytest

from strokesense.engine.context import ShapeLabel, ShapeMetrics
from strokesense.engine.layer2.t2_01_shape_classification import classify
from strokesense.utils.geometry import BoundingBox

_BOX = BoundingBox(0.0, 0.0, 100.0, 100.0)


def _metrics(corners: int, circ: float, aspect: float = 1.0, box: BoundingBox = _BOX) -> ShapeMetrics:
    return ShapeMetrics(
        bounding_box=box,
        aspect_ratio=aspect,
        perimeter=400.0,
        area=10000.0,
        circularity=circ,
        corner_count=corners,
    )


@pytest.mark.parametrize(
    "corners, circ, aspect, expected",
    [
        # three vertices always read as a triangle
        (3, 0.9, 1.0, ShapeLabel.TRIANGLE),
        # 2-4 vertices with low circularity
        (2, 0.5, 1.0, ShapeLabel.TRIANGLE),
        (4, 0.59, 1.0, ShapeLabel.TRIANGLE),
        # quad branch
        (4, 0.75, 1.0, ShapeLabel.SQUARE),
        (4, 0.75, 1.19, ShapeLabel.SQUARE),
        (4, 0.75, 1.2, ShapeLabel.RECTANGLE),
        (4, 0.75, 0.8, ShapeLabel.RECTANGLE),
        (5, 0.3, 1.0, ShapeLabel.SQUARE),
        (5, 0.3, 3.0, ShapeLabel.RECTANGLE),
        # round
        (8, 0.85, 1.0, ShapeLabel.CIRCLE),
        (2, 0.75, 1.0, ShapeLabel.CIRCLE),
        (0, 0.71, 1.0, ShapeLabel.CIRCLE),
        # nothing matches
        (8, 0.7, 1.0, ShapeLabel.UNKNOWN),
        (1, 0.0, 1.0, ShapeLabel.UNKNOWN),
        (0, 0.0, 0.0, ShapeLabel.UNKNOWN),
    ],
)
def test_rule_order(corners, circ, aspect, expected):
    assert classify(_metrics(corners, circ, aspect)) is expected


def test_right_angle_three_corners_is_triangle():
    box = BoundingBox(0.0, 0.0, 100.0, 100.0)
    assert classify(_metrics(3, 0.54, 1.0, box)) is ShapeLabel.TRIANGLE


def test_degenerate_box_skips_quad_branch():
    flat = BoundingBox(0.0, 0.0, 200.0, 0.0)
    assert classify(_metrics(5, 0.0, float("inf"), flat)) is ShapeLabel.UNKNOWN
    assert classify(_metrics(5, 0.8, float("inf"), flat)) is ShapeLabel.CIRCLE


def test_degenerate_box_still_allows_triangle_rule():
    flat = BoundingBox(0.0, 0.0, 0.0, 50.0)
    assert classify(_metrics(3, 0.0, 0.0, flat)) is ShapeLabel.TRIANGLE
