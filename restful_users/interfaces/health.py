"""
Health check router.

Reports the service version and whether the users database answers
a trivial query. Always returns 200 so that liveness checks stay green
while the database is restarting.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from restful_users.core.config import settings
from restful_users.infrastructure.database import get_engine
from restful_users.interfaces.users.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _database_status() -> str:
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Users database unavailable: %s", type(exc).__name__)
        return "unavailable"
    return "ok"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns the service version and users database reachability.",
)
def health_check() -> HealthResponse:
    """Return service status, version and database reachability."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        database=_database_status(),
    )
