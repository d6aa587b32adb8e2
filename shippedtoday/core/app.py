"""
Application factory

Creates and configures the FastAPI application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..controllers import launch_router
from ..middleware import (
    LoggingMiddleware,
    OriginGuardMiddleware,
    setup_cors,
    setup_error_handlers,
)
from .dependencies import get_launch_service
from .logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan"""
    logger.info("Starting ShippedToday...")

    # Resolve through overrides so a substituted service is the one initialized
    service_factory = app.dependency_overrides.get(get_launch_service, get_launch_service)
    service_factory().initialize()

    logger.info("ShippedToday started")
    yield

    logger.info("Shutting down ShippedToday...")


def create_app() -> FastAPI:
    """Build the FastAPI application"""

    setup_logging()

    app = FastAPI(
        title="ShippedToday",
        description="Community feed of product launches",
        version=__version__,
        lifespan=lifespan,
    )

    setup_cors(app)
    setup_error_handlers(app)

    # Runs before the controllers see a submission
    app.add_middleware(OriginGuardMiddleware)

    app.add_middleware(LoggingMiddleware)

    app.include_router(launch_router)

    return app
