"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


def trace_polygon(vertices: list[tuple[float, float]], points_per_side: int = 25) -> np.ndarray:
    """Densely trace a closed polygon, ending back on the first vertex."""
    verts = np.asarray(vertices, dtype=np.float64)
    pts = []
    for i in range(len(verts)):
        a = verts[i]
        b = verts[(i + 1) % len(verts)]
        for k in range(points_per_side):
            pts.append(a + (b - a) * k / points_per_side)
    pts.append(verts[0])
    return np.array(pts)


def trace_circle(radius: float = 100.0, n: int = 64, cx: float = 0.0, cy: float = 0.0) -> np.ndarray:
    """n points around a circle, closed by repeating the first point."""
    angles = np.arange(n) * 2 * np.pi / n
    pts = np.column_stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)])
    return np.vstack([pts, pts[:1]])


def regular_polygon(n: int, radius: float = 100.0) -> np.ndarray:
    angles = np.arange(n) * 2 * np.pi / n
    return np.column_stack([radius * np.cos(angles), radius * np.sin(angles)])


# Right triangle, legs of 120
TRIANGLE_STROKE = trace_polygon([(0, 0), (120, 0), (0, 120)], points_per_side=20)
SQUARE_STROKE = trace_polygon([(0, 0), (100, 0), (100, 100), (0, 100)])
RECTANGLE_STROKE = trace_polygon([(0, 0), (150, 0), (150, 100), (0, 100)])
CIRCLE_STROKE = trace_circle(radius=100.0, n=64)


@pytest.fixture
def triangle_stroke() -> np.ndarray:
    return TRIANGLE_STROKE.copy()


@pytest.fixture
def square_stroke() -> np.ndarray:
    return SQUARE_STROKE.copy()


@pytest.fixture
def rectangle_stroke() -> np.ndarray:
    return RECTANGLE_STROKE.copy()


@pytest.fixture
def circle_stroke() -> np.ndarray:
    return CIRCLE_STROKE.copy()


@pytest.fixture
def noisy_stroke() -> np.ndarray:
    """Wobbly open scribble, reproducible."""
    rng = np.random.default_rng(7)
    t = np.linspace(0, 4 * np.pi, 300)
    base = np.column_stack([t * 40, np.sin(t) * 80])
    return base + rng.normal(scale=6.0, size=base.shape)
