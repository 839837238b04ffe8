"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from srealip.api.ip import router as ip_router
from srealip.configs.config import get_app_config
from srealip.infra.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging once, before the first request."""
    config = get_app_config()
    setup_logging(config.logging)
    logger.info("srealip started (mode=%s)", config.proxy.mode)
    yield


def get_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="srealip",
        description="Real client IP extraction behind reverse proxies",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(ip_router)
    return app


app = get_app()
