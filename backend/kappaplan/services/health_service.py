"""
Health service.
Reports uptime and whether the SQLite database answers queries.
"""

import time

from kappaplan.db import session as db_session
from kappaplan.db.repositories.health_repository import HealthRepository
from kappaplan.schemas.health import HealthResponse
from kappaplan.core.config import settings
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


class HealthService:
    """Service for health check operations. Holds no database session."""

    def __init__(self):
        self.start_time = time.time()

    async def check_database(self) -> str:
        """Run a trivial query on a fresh session."""
        if db_session.async_session_maker is None:
            db_session.create_sessionmaker()

        try:
            async with db_session.async_session_maker() as session:
                ok = await HealthRepository(session).check_database()
        except Exception as e:
            logger.warning("Database health check failed", extra={"error": str(e)})
            return f"error: {e}"
        return "ok" if ok else "error"

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime (ISO 8601 duration) and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        checks = {"database": await self.check_database()}
        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=f"PT{uptime_seconds}S",
            version=settings.VERSION,
            checks=checks,
        )
