"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from src.api.routes import router
from src.calculators.tax_data import TAX_YEAR

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: configure logging. Nothing to tear down."""
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting up (UK tax year %s)...", TAX_YEAR)

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title=settings.api_title, lifespan=lifespan)
    app.include_router(router)
    return app
