"""Service layer for link operations."""
import logging

from sqlalchemy import Row, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from db.session import commit, execute
from models.link import Link


logger = logging.getLogger(__name__)


async def create_link(db: AsyncSession, name: str, url: str, category_id: int) -> int:
    """
    Insert a link and return its id.

    The url is stored verbatim. A category_id with no matching category is
    rejected by the foreign-key constraint and surfaces as StoreError.
    """
    try:
        result = await execute(
            db,
            insert(Link)
            .values(name=name, url=url, category_id=category_id)
            .returning(Link.id),
        )
        link_id = result.scalar_one()
        await commit(db)
    except StoreError:
        await db.rollback()
        raise
    logger.info("Created link %s in category %s", link_id, category_id)
    return link_id


async def update_link(
    db: AsyncSession,
    link_id: int,
    name: str,
    url: str,
    category_id: int,
) -> None:
    """Replace a link's name, url and category. Unknown ids are a no-op."""
    try:
        await execute(
            db,
            update(Link)
            .where(Link.id == link_id)
            .values(name=name, url=url, category_id=category_id),
        )
        await commit(db)
    except StoreError:
        await db.rollback()
        raise


async def delete_link(db: AsyncSession, link_id: int) -> None:
    """Delete a link by id. Unknown ids are a no-op."""
    try:
        await execute(db, delete(Link).where(Link.id == link_id))
        await commit(db)
    except StoreError:
        await db.rollback()
        raise


async def list_links(db: AsyncSession) -> list[Row[tuple[int, str, str, int]]]:
    """Return (id, name, url, category_id) for every link, in store order."""
    result = await execute(db, select(Link.id, Link.name, Link.url, Link.category_id))
    return list(result.all())
