"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matrix2d import __version__
from matrix2d.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.matrix2d_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="matrix2d",
        description="Compose 2D transform lists into affine matrices and decompose them back",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Importing the transform module fires the @transform_kind decorators
    import matrix2d.engine.transforms  # noqa: F401

    from matrix2d.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
