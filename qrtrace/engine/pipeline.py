"""Pipeline orchestrator — runs render stages in dependency order with gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from qrtrace.engine.config import PipelineConfig
from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, TransformRegistry, get_registry

logger = logging.getLogger(__name__)

STAGE_PACKAGES = ("layer0", "layer1", "layer2")


class Pipeline:
    """Orchestrates the render pipeline.

    Stage failures are fatal: the failing stage is recorded in ctx.errors,
    logged and re-raised. No partial output is returned.
    """

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: RenderContext) -> RenderContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        if ctx.config is None:
            ctx.config = self.config

        skip_ids = self._adaptive_gate(ctx)

        all_specs = self.registry.all()
        requested = {s.id for s in all_specs} - skip_ids
        ordered = [s for s in self.registry.resolve_order(requested) if s.id not in skip_ids]

        logger.info(
            "Pipeline: %d transforms queued (%d skipped)",
            len(ordered),
            len(skip_ids & {s.id for s in all_specs}),
        )

        for spec in ordered:
            self._run_one(ctx, spec.id, spec.fn)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms, %d components in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            len(ctx.paths) or len(ctx.dots),
            total,
        )
        return ctx

    def run_layer(self, ctx: RenderContext, layer: Layer) -> RenderContext:
        """Run only transforms in a specific layer."""
        if ctx.config is None:
            ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_one(ctx, spec.id, spec.fn)
        return ctx

    def _run_one(self, ctx: RenderContext, transform_id: str, fn) -> None:
        t0 = time.perf_counter()
        try:
            fn(ctx)
        except Exception as e:
            ctx.errors[transform_id] = str(e)
            logger.error("  %s FAILED: %s", transform_id, e)
            raise
        ctx.completed_transforms.add(transform_id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", transform_id, elapsed)

    def _adaptive_gate(self, ctx: RenderContext) -> set[str]:
        """Determine which transforms to skip for this render.

        - Square canvases skip circular expansion
        - The dots style draws one circle per module: no labeling or tracing
        - Traced styles skip per-module dot collection
        """
        skip: set[str] = set()

        if ctx.shape != "circle":
            skip.add("T0.02")  # Circle expansion

        if ctx.traced:
            skip.add("T2.04")  # Dot cells
        else:
            skip.update({
                "T1.01",  # Foreground labels
                "T1.02",  # Background labels
                "T2.01",  # Outer contours
                "T2.02",  # Hole contours
                "T2.03",  # Path rendering
            })

        return skip


def load_transforms() -> int:
    """Import all stage modules so @transform decorators fire. Returns the registry size."""
    for layer_name in STAGE_PACKAGES:
        package = importlib.import_module(f"qrtrace.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")
    return get_registry().count


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance with all stages loaded."""
    load_transforms()
    return Pipeline(config=config)
