"""StrokeSense — freehand gesture shape recognition."""

__version__ = "0.1.0"
