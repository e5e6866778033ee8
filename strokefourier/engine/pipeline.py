"""Pipeline orchestrator — runs stages in dependency order with config gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Generator
from typing import Any

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire. Idempotent."""
    for layer_name in _LAYER_PACKAGES:
        package_name = f"strokefourier.engine.{layer_name}"
        try:
            package = importlib.import_module(package_name)
            for _, module_name, _ in pkgutil.iter_modules(package.__path__):
                importlib.import_module(f"{package_name}.{module_name}")
        except ModuleNotFoundError:
            logger.warning("Stage package %s not found", package_name)


class Pipeline:
    """Orchestrates the stage pipeline.

    Every run starts from the raw input and recomputes every stage; nothing is
    carried over from a previous context.
    """

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def _queue(self, ctx: StrokeContext) -> list[StageSpec]:
        skip_ids = self.registry.disabled_for(ctx.config)
        if skip_ids:
            logger.debug("Gated off by config: %s", ", ".join(sorted(skip_ids)))
        return self.registry.resolve_order(exclude=skip_ids)

    def run(self, ctx: StrokeContext) -> StrokeContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ordered = self._queue(ctx)

        logger.info(
            "Pipeline: %d stages queued for %d points",
            len(ordered),
            0 if ctx.raw_input is None else len(ctx.raw_input),
        )

        for spec in ordered:
            self._run_stage(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages in %.1fms",
            len(ctx.completed_stages),
            len(ordered),
            total,
        )
        return ctx

    def run_streaming(self, ctx: StrokeContext) -> Generator[dict[str, Any], None, None]:
        """Run the pipeline, yielding a progress dict before and after each stage.

        The caller's ``ctx`` is mutated in-place, so after the generator is
        exhausted the context contains all results (same as ``run()``).
        """
        ordered = self._queue(ctx)
        total = len(ordered)

        for i, spec in enumerate(ordered):
            event = {
                "stage_id": spec.id,
                "description": spec.description,
                "layer": spec.layer.name,
                "index": i,
                "total": total,
                "elapsed_ms": 0.0,
                "status": "running",
                "error": "",
            }
            yield event

            ok = self._run_stage(ctx, spec)
            yield {
                **event,
                "elapsed_ms": ctx.timings_ms.get(spec.id, 0.0),
                "status": "ok" if ok else "error",
                "error": ctx.errors.get(spec.id, ""),
            }

    def run_layer(self, ctx: StrokeContext, layer: Layer) -> StrokeContext:
        """Run only the enabled stages in a specific layer."""
        for spec in self.registry.get_layer(layer):
            if not spec.is_enabled(ctx.config):
                continue
            self._run_stage(ctx, spec)
        return ctx

    def _run_stage(self, ctx: StrokeContext, spec: StageSpec) -> bool:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return False
        finally:
            ctx.timings_ms[spec.id] = round((time.perf_counter() - t0) * 1000, 3)
        ctx.completed_stages.add(spec.id)
        logger.debug("  %s completed in %.3fms", spec.id, ctx.timings_ms[spec.id])
        return True


def create_pipeline(registry: StageRegistry | None = None) -> Pipeline:
    """Factory function: registers the built-in stages and returns a pipeline."""
    if registry is None:
        register_stages()
    return Pipeline(registry=registry)
