"""qrtrace render engine."""

from qrtrace.engine.registry import transform, Layer, get_registry
from qrtrace.engine.context import RenderContext
from qrtrace.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "RenderContext",
    "Pipeline",
    "create_pipeline",
]
