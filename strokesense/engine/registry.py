"""Stroke transforms and the order they run in.

Each metric or classification step lives in its own module under layer0/,
layer1/ or layer2/ and registers itself with @transform at import time.
load_transforms() imports those packages; the pipeline then asks the
registry for one flat run order.
"""

from __future__ import annotations

import enum
import heapq
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from strokesense.engine.context import StrokeContext

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2"]


class Layer(enum.IntEnum):
    GEOMETRY = 0
    SHAPE_ANALYSIS = 1
    CLASSIFICATION = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["StrokeContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    def __init__(self) -> None:
        self._specs: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._specs:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._specs[spec.id] = spec
        logger.debug("Registered %s [%s] %s", spec.id, spec.layer.name, spec.description)

    def resolve_order(self) -> list[TransformSpec]:
        """Every registered transform, each one after all of its dependencies.

        Among transforms that are ready at the same time, lower layers run
        first, then lower IDs. An unregistered dependency or a cycle raises
        ValueError.
        """
        waiting_on: dict[str, int] = {}
        dependents: dict[str, list[str]] = {tid: [] for tid in self._specs}
        for tid, spec in self._specs.items():
            unknown = [dep for dep in spec.dependencies if dep not in self._specs]
            if unknown:
                raise ValueError(f"{tid} depends on unregistered transform(s): {unknown}")
            waiting_on[tid] = len(set(spec.dependencies))
            for dep in set(spec.dependencies):
                dependents[dep].append(tid)

        ready = [(s.layer, s.id) for s in self._specs.values() if waiting_on[s.id] == 0]
        heapq.heapify(ready)
        ordered: list[TransformSpec] = []
        while ready:
            _, tid = heapq.heappop(ready)
            ordered.append(self._specs[tid])
            for child in dependents[tid]:
                waiting_on[child] -= 1
                if waiting_on[child] == 0:
                    heapq.heappush(ready, (self._specs[child].layer, child))

        if len(ordered) != len(self._specs):
            stuck = sorted(tid for tid, n in waiting_on.items() if n > 0)
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._specs)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def load_transforms() -> TransformRegistry:
    """Import every transform module so the @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"strokesense.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a stroke transform."""

    def decorator(fn: Callable[["StrokeContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or []),
                description=description,
            )
        )
        return fn

    return decorator
