"""Recognizer configuration — tolerances, sampling strides and input limits."""

from __future__ import annotations

from dataclasses import dataclass

from strokesense.errors import InvalidConfigError


@dataclass(frozen=True)
class RecognizerConfig:
    """Tunable parameters for one recognition call.

    Distances are in the caller's coordinate units; the defaults assume screen
    pixels, so rescale epsilon when recording in world space.
    """

    # Douglas-Peucker tolerance for corner detection
    epsilon: float = 15.0

    # Area is measured on every Nth point, perimeter on every Mth.
    # 10 vs 1 skews circularity low on coarse strokes.
    area_stride: int = 10
    perimeter_stride: int = 1

    # Below this many points no label is produced
    min_points_for_classification: int = 5
    # Below this many points corner detection is skipped (corner_count = 0)
    min_points_for_corner_detection: int = 10

    # Longer strokes are thinned before processing to bound the O(n^2) simplifier
    max_points: int = 4096

    def __post_init__(self) -> None:
        if not self.epsilon > 0:
            raise InvalidConfigError(f"epsilon must be positive, got {self.epsilon}")
        for name in (
            "area_stride",
            "perimeter_stride",
            "min_points_for_classification",
            "min_points_for_corner_detection",
        ):
            value = getattr(self, name)
            if value < 1:
                raise InvalidConfigError(f"{name} must be >= 1, got {value}")
        if self.max_points < max(2, self.min_points_for_classification):
            raise InvalidConfigError(
                f"max_points must be >= max(2, min_points_for_classification), got {self.max_points}"
            )

    @property
    def downsample_stride(self) -> int:
        return self.area_stride
