"""wold FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from wold import __version__
from wold.config import Settings, get_settings
from wold.services.wake_service import WakeHandler

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. Configuration is fixed for the app's lifetime."""
    from wold.api.routes import api_router

    settings = settings or get_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        logger.info("wold v%s started, listening on %s", __version__, settings.listen)
        logger.info("wol dst addr: %s", settings.destination)
        try:
            yield
        finally:
            logger.info("wold shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )
    app.state.wake_handler = WakeHandler(
        destination=settings.destination,
        source=settings.source_addr,
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


def run(settings: Settings | None = None, **kwargs: Any) -> None:
    import uvicorn

    settings = settings or get_settings()
    listen = settings.listen
    uvicorn.run(
        create_app(settings),
        host=listen.host,
        port=listen.port,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
