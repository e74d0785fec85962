"""Service layer for category operations."""
import logging

from sqlalchemy import Row, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import CategoryExistsError, ConstraintViolationError, StoreError
from db.session import commit, execute
from models.category import Category, category_name_key
from models.link import Link


logger = logging.getLogger(__name__)


async def create_category(db: AsyncSession, name: str) -> int:
    """
    Insert a category and return its id.

    Raises:
        CategoryExistsError: A category with the same name (ignoring case) exists.
        StoreError: Any other database failure.
    """
    try:
        result = await execute(
            db,
            insert(Category)
            .values(name=name, name_key=category_name_key(name))
            .returning(Category.id),
        )
        category_id = result.scalar_one()
        await commit(db)
    except ConstraintViolationError as e:
        await db.rollback()
        raise CategoryExistsError(name) from e
    except StoreError:
        await db.rollback()
        raise
    logger.info("Created category %s (%r)", category_id, name)
    return category_id


async def delete_category(db: AsyncSession, category_id: int) -> None:
    """
    Delete a category and all of its links in a single transaction.

    Links are deleted first, then the category. If either step fails the
    transaction is rolled back and no row is removed. Deleting an unknown id
    is a no-op.
    """
    try:
        await execute(db, delete(Link).where(Link.category_id == category_id))
        await execute(db, delete(Category).where(Category.id == category_id))
        await commit(db)
    except StoreError:
        await db.rollback()
        raise
    logger.info("Deleted category %s", category_id)


async def list_categories(db: AsyncSession) -> list[Row[tuple[int, str]]]:
    """Return (id, name) for every category, in store order."""
    result = await execute(db, select(Category.id, Category.name))
    return list(result.all())
