"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from strokesense import __version__
from strokesense.config import settings
from strokesense.engine.registry import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.strokesense_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="StrokeSense",
        description="Freehand gesture shape recognition — geometric heuristics, no training data",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    load_transforms()

    from strokesense.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
