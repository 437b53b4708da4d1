"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes
from .core import Settings, build_engine, load_settings, setup_logging
from .services import initialize

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing table breaks every request, so a failure here aborts startup.
    initialize(app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Ranking API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = build_engine(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


def main() -> None:
    import uvicorn

    settings = load_settings()
    app = create_app(settings)
    logger.info("Starting Ranking API server on port %d.", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
