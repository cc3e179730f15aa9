"""
Database initialization and bootstrapping.
Creates tables and seeds the default absence type catalogue.
"""

from sqlalchemy import select, func

from kappaplan.db.base import Base
from kappaplan.db import session as db_session
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


DEFAULT_ABSENCE_TYPES = [
    {"id": "vacation", "name": "Vacation", "icon": "🏖️", "color": "#4CAF50",
     "default_days": 26, "is_paid": True, "requires_approval": True, "sort_order": 1},
    {"id": "sick", "name": "Sick leave", "icon": "🤒", "color": "#F44336",
     "default_days": 0, "is_paid": True, "requires_approval": False, "sort_order": 2},
    {"id": "special", "name": "Special leave", "icon": "📋", "color": "#2196F3",
     "default_days": 0, "is_paid": True, "requires_approval": True, "sort_order": 3},
    {"id": "unpaid", "name": "Unpaid leave", "icon": "💼", "color": "#9E9E9E",
     "default_days": 0, "is_paid": False, "requires_approval": True, "sort_order": 4},
    {"id": "training", "name": "Training", "icon": "🎓", "color": "#FF9800",
     "default_days": 0, "is_paid": True, "requires_approval": True, "sort_order": 5},
]


async def create_tables() -> None:
    """
    Create all database tables that do not exist yet.
    """
    import kappaplan.models  # noqa: F401  registers every model with Base

    async with db_session.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized")


async def seed_initial_data() -> None:
    """
    Seed the absence type catalogue into an empty database.
    """
    from kappaplan.models.absence import AbsenceType

    async with db_session.async_session_maker() as session:
        existing = await session.scalar(select(func.count()).select_from(AbsenceType))
        if existing:
            return

        for absence_type in DEFAULT_ABSENCE_TYPES:
            session.add(AbsenceType(is_active=True, **absence_type))
        await session.commit()

    logger.info("Seeded default absence types", extra={"count": len(DEFAULT_ABSENCE_TYPES)})
