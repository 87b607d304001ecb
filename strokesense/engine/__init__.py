"""StrokeSense gesture-to-shape recognition engine."""

from strokesense.engine.config import RecognizerConfig
from strokesense.engine.context import (
    RecognitionResult,
    ShapeLabel,
    ShapeMetrics,
    StrokeContext,
)
from strokesense.engine.pipeline import Pipeline
from strokesense.engine.recognizer import recognize
from strokesense.engine.registry import Layer, get_registry, transform
from strokesense.engine.session import GestureSession

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "RecognizerConfig",
    "StrokeContext",
    "ShapeLabel",
    "ShapeMetrics",
    "RecognitionResult",
    "Pipeline",
    "recognize",
    "GestureSession",
]
