"""Polyline simplification — Ramer-Douglas-Peucker."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from strokesense.errors import InvalidConfigError
from strokesense.utils.geometry import perpendicular_distances


def douglas_peucker(
    points: NDArray[np.float64],
    epsilon: float,
) -> NDArray[np.float64]:
    """Ramer-Douglas-Peucker simplification of an ordered point sequence.

    Keeps the first and last point plus every point that deviates more than
    epsilon from the chord of its enclosing range. Ranges are processed from
    an explicit work stack instead of recursing, so a stroke of any length
    cannot exhaust the interpreter stack. Ties for the farthest point go to
    the lowest index.

    Returns a copy; inputs shorter than two points come back unchanged.
    """
    if epsilon <= 0:
        raise InvalidConfigError(f"epsilon must be positive, got {epsilon}")
    n = len(points)
    if n < 3:
        return points.copy()

    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue
        dists = perpendicular_distances(points[start + 1 : end], points[start], points[end])
        offset = int(np.argmax(dists))
        if dists[offset] > epsilon:
            split = start + 1 + offset
            keep[split] = True
            stack.append((split, end))
            stack.append((start, split))

    return points[keep].copy()
