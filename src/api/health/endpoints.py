"""Health check endpoints."""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src import __version__
from src.api.health.models import HealthResponse
from src.database.connection import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _check_database() -> bool:
    """Run a trivial query against the reminder store.

    :returns: True if the store answered.
    """
    try:
        with get_session() as session:
            session.execute(text("SELECT 1"))
    except (SQLAlchemyError, KeyError) as e:
        logger.warning(f"Health check database probe failed: {e}")
        return False
    return True


@router.get(
    "",
    response_model=HealthResponse,
    summary="Check service health",
    description="Returns the health status of the API service and its reminder store.",
)
def health_check() -> HealthResponse:
    """Check if the API service is healthy.

    :returns: Health status response.
    """
    logger.debug("Health check requested")
    database_ok = _check_database()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        version=__version__,
        database="ok" if database_ok else "unavailable",
    )
