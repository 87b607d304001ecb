"""Tests for the pipeline orchestrator."""

import numpy as np
import pytest

from strokesense.engine.config import RecognizerConfig
from strokesense.engine.context import ShapeLabel, StrokeContext
from strokesense.engine.pipeline import Pipeline
from strokesense.engine.registry import Layer, TransformRegistry, TransformSpec


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: StrokeContext) -> None:
        results.append("t1")

    def t2(ctx: StrokeContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.GEOMETRY, fn=t1))
    reg.register(TransformSpec(id="T0.02", layer=Layer.GEOMETRY, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = StrokeContext()
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: StrokeContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.GEOMETRY, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = StrokeContext()
    pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]


def test_short_stroke_skips_corner_detection():
    pts = np.array([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0], [5, 5]], dtype=float)
    ctx = Pipeline().run(StrokeContext(points=pts, config=RecognizerConfig()))

    assert "T1.02" not in ctx.completed_transforms
    assert ctx.corner_count == 0
    assert len(ctx.corners) == 0
    assert ctx.label is not None
    assert not ctx.errors


def test_full_pipeline_square(square_stroke):
    ctx = Pipeline().run(StrokeContext(points=square_stroke))

    assert ctx.completed_transforms == {"T0.01", "T0.02", "T0.03", "T1.01", "T1.02", "T2.01"}
    assert ctx.bounding_box.width == 100.0
    assert ctx.perimeter == pytest.approx(400.0)
    assert ctx.corner_count == 4
    assert ctx.label is ShapeLabel.SQUARE
