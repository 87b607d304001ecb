"""Pipeline orchestrator — runs transforms in dependency order with adaptive gating."""

from __future__ import annotations

import logging
import time

from strokesense.engine.context import StrokeContext
from strokesense.engine.registry import TransformRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: StrokeContext) -> StrokeContext:
        """Run every registered transform on the given context."""
        start = time.perf_counter()

        skip_ids = self._adaptive_gate(ctx)
        ordered = [s for s in self.registry.resolve_order() if s.id not in skip_ids]

        logger.debug(
            "Pipeline: %d transforms queued (%d skipped) for %d points",
            len(ordered),
            len(skip_ids),
            ctx.num_points,
        )

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.2fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pipeline complete: %d/%d transforms in %.1fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def _adaptive_gate(self, ctx: StrokeContext) -> set[str]:
        """Determine which transforms to skip based on stroke size.

        Short strokes skip corner detection; corner_count stays 0 and no
        corners are reported.
        """
        skip: set[str] = set()
        if ctx.num_points < ctx.config.min_points_for_corner_detection:
            skip.add("T1.02")
        return skip


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline()
