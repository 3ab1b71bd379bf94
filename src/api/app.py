"""FastAPI application configuration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.api.exception_handlers import register_exception_handlers
from src.api.health import router as health_router
from src.api.models import ErrorResponse
from src.api.reminders import router as reminders_router
from src.database.connection import dispose_engine
from src.observability.sentry import init_sentry
from src.utils.logging import configure_logging

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Release the database pool when the application shuts down."""
    yield
    dispose_engine()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Problem Reminder API",
        version=__version__,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    # Browser extension clients call the API cross-origin
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register routers
    application.include_router(health_router)
    application.include_router(reminders_router)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
