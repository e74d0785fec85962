"""Idempotent schema creation, run on every startup."""
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from models.base import Base


logger = logging.getLogger(__name__)


async def init_schema(engine: AsyncEngine) -> None:
    """
    Create the categories and links tables and their indexes if absent.

    Uses CREATE ... IF NOT EXISTS semantics, so existing data is never touched.
    There are no migrations; errors propagate and abort startup.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))
