"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from strokesense.errors import InvalidConfigError, InvalidInputError


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box as (min_x, min_y, width, height)."""

    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    @property
    def is_degenerate(self) -> bool:
        """Zero width or zero height (collinear axis-aligned stroke)."""
        return self.width <= 0.0 or self.height <= 0.0

    def contains(self, x: float, y: float, tol: float = 1e-9) -> bool:
        return (
            self.min_x - tol <= x <= self.max_x + tol
            and self.min_y - tol <= y <= self.max_y + tol
        )


def as_points(points: ArrayLike) -> NDArray[np.float64]:
    """Coerce a point sequence into an Nx2 float64 array.

    Raises InvalidInputError for anything that is not a finite Nx2 array.
    An empty sequence is returned as a (0, 2) array.
    """
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"points are not numeric (x, y) pairs: {e}") from e
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInputError(f"points must be an Nx2 array, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("points must have finite coordinates")
    return arr


def _require_points(points: NDArray[np.float64], what: str) -> None:
    if len(points) == 0:
        raise InvalidInputError(f"{what} requires at least one point")


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def perpendicular_distance(
    point: Sequence[float],
    line_start: Sequence[float],
    line_end: Sequence[float],
) -> float:
    """Distance from point to the infinite line through line_start/line_end.

    Twice the triangle area divided by the base. Coincident line endpoints
    fall back to the point-to-point distance.
    """
    base = distance(line_start, line_end)
    if base == 0.0:
        return distance(point, line_start)
    twice_area = abs(
        line_start[0] * (line_end[1] - point[1])
        + line_end[0] * (point[1] - line_start[1])
        + point[0] * (line_start[1] - line_end[1])
    )
    return twice_area / base


def perpendicular_distances(
    points: NDArray[np.float64],
    line_start: NDArray[np.float64],
    line_end: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Vectorised perpendicular_distance for every row of points."""
    dx = line_end[0] - line_start[0]
    dy = line_end[1] - line_start[1]
    base = math.hypot(dx, dy)
    rel = points - line_start
    if base == 0.0:
        return np.sqrt(np.sum(rel**2, axis=1))
    return np.abs(rel[:, 0] * dy - rel[:, 1] * dx) / base


def shoelace_area(points: NDArray[np.float64]) -> float:
    """Absolute polygon area, closing the ring last -> first.

    Self-intersecting rings give the net signed sum, which is only a heuristic.
    """
    _require_points(points, "shoelace_area")
    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(abs(0.5 * np.sum(x * y_next - x_next * y)))


def perimeter(points: NDArray[np.float64]) -> float:
    """Length of the polyline plus the closing segment back to the first point."""
    _require_points(points, "perimeter")
    if len(points) < 2:
        return 0.0
    ring = np.vstack([points, points[:1]])
    diffs = np.diff(ring, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def bounding_box(points: NDArray[np.float64]) -> BoundingBox:
    _require_points(points, "bounding_box")
    min_x = float(np.min(points[:, 0]))
    min_y = float(np.min(points[:, 1]))
    return BoundingBox(
        min_x=min_x,
        min_y=min_y,
        width=float(np.max(points[:, 0])) - min_x,
        height=float(np.max(points[:, 1])) - min_y,
    )


def aspect_ratio(box: BoundingBox) -> float:
    """width / height; inf for a flat horizontal box, 0.0 for a single point."""
    if box.height > 0.0:
        return box.width / box.height
    if box.width > 0.0:
        return float("inf")
    return 0.0


def circularity(area: float, perim: float) -> float:
    """4*pi*area / perimeter**2. 1.0 for a circle, 0.0 for zero perimeter."""
    if perim <= 0.0:
        return 0.0
    return 4.0 * math.pi * area / (perim**2)


def downsample(points: NDArray[np.float64], stride: int) -> NDArray[np.float64]:
    """Keep every stride-th point, always including the last one."""
    if stride < 1:
        raise InvalidConfigError(f"stride must be >= 1, got {stride}")
    if stride == 1 or len(points) == 0:
        return points
    idx = list(range(0, len(points), stride))
    if (len(points) - 1) % stride != 0:
        idx.append(len(points) - 1)
    return points[idx]


def resample(points: NDArray[np.float64], max_points: int) -> NDArray[np.float64]:
    """Evenly thin a stroke to at most max_points, keeping both endpoints."""
    if len(points) <= max_points:
        return points
    idx = np.unique(np.linspace(0, len(points) - 1, max_points).round().astype(np.int64))
    return points[idx]
