"""FastAPI dependency injection."""

from __future__ import annotations

from qrtrace.engine.pipeline import Pipeline, create_pipeline


def get_pipeline() -> Pipeline:
    return create_pipeline()
