"""Exception hierarchy for stroke recognition."""

from __future__ import annotations


class StrokeSenseError(Exception):
    """Base class for all recognition errors."""


class InvalidInputError(StrokeSenseError, ValueError):
    """Stroke is empty or not a finite Nx2 point array."""


class InvalidConfigError(StrokeSenseError, ValueError):
    """Recognizer configuration value out of range."""


class RecognitionError(StrokeSenseError):
    """One or more pipeline transforms failed."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        failed = ", ".join(f"{tid}: {msg}" for tid, msg in sorted(self.errors.items()))
        super().__init__(f"Recognition failed ({failed})")
