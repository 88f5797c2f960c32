"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qrtrace import __version__
from qrtrace.config import settings
from qrtrace.engine.pipeline import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.qrtrace_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="qrtrace",
        description="QR module outlining — styled, compact SVG paths from module grids",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    load_transforms()

    from qrtrace.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
