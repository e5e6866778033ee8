"""Stage registry — every pipeline stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.02", layer=Layer.GEOMETRY, dependencies=["S1.01"])
    def smoothing(ctx: StrokeContext) -> None:
        ctx.smoothed = smooth(ctx.require("simplified"), ctx.config.smoothing_passes)

Optional stages pass ``enabled=`` a predicate over the run config; the
pipeline leaves them out of the queue when it returns False.
"""

from __future__ import annotations

import enum
import heapq
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from strokefourier.engine.config import PipelineConfig
    from strokefourier.engine.context import StrokeContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    INPUT = 0
    GEOMETRY = 1
    SAMPLING = 2
    SPECTRAL = 3
    EXPORT = 4


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["StrokeContext"], None]
    dependencies: list[str] = field(default_factory=list)
    enabled: Callable[["PipelineConfig"], bool] | None = None
    description: str = ""

    @property
    def optional(self) -> bool:
        return self.enabled is not None

    def is_enabled(self, config: PipelineConfig) -> bool:
        return self.enabled is None or bool(self.enabled(config))


class StageRegistry:
    """Registry of pipeline stages keyed by ID."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        specs = [s for s in self._stages.values() if s.layer == layer]
        return sorted(specs, key=lambda s: s.id)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def disabled_for(self, config: PipelineConfig) -> set[str]:
        """IDs of optional stages switched off by ``config``."""
        return {s.id for s in self._stages.values() if not s.is_enabled(config)}

    def resolve_order(self, exclude: Iterable[str] = ()) -> list[StageSpec]:
        """Dependency order over every stage not in ``exclude``.

        A dependency on an excluded stage counts as satisfied, so gated-off
        stages drop out without taking their dependents with them. Ties break
        by (layer, id).
        """
        excluded = set(exclude)
        pool = {sid: s for sid, s in self._stages.items() if sid not in excluded}

        dependents: dict[str, list[str]] = {sid: [] for sid in pool}
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    dependents[dep].append(sid)
                    in_degree[sid] += 1
                elif dep not in excluded:
                    raise ValueError(f"Stage {sid} depends on unknown stage {dep}")

        heap = [(pool[sid].layer, sid) for sid, d in in_degree.items() if d == 0]
        heapq.heapify(heap)
        ordered: list[StageSpec] = []
        while heap:
            _, sid = heapq.heappop(heap)
            ordered.append(pool[sid])
            for other in dependents[sid]:
                in_degree[other] -= 1
                if in_degree[other] == 0:
                    heapq.heappush(heap, (pool[other].layer, other))

        if len(ordered) != len(pool):
            missing = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {sorted(missing)}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    enabled: Callable[["PipelineConfig"], bool] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["StrokeContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or []),
                enabled=enabled,
                description=description,
            )
        )
        return fn

    return decorator
