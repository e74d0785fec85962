"""Async SQLAlchemy engine, session dependency and statement helpers."""
import asyncio
import logging
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.sql import Executable

from core.config import STATEMENT_TIMEOUT_SECONDS, Settings
from core.exceptions import ConstraintViolationError, StatementTimeoutError, StoreError


logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """SQLite ignores REFERENCES clauses unless this pragma is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the SQLite file, creating its directory if missing.

    The pool holds exactly one connection, so concurrent requests queue for it
    and every statement executes sequentially.
    """
    Path(settings.sqlite_path).parent.mkdir(parents=True, exist_ok=True)
    engine = create_async_engine(
        settings.database_url,
        echo=False,
        pool_size=1,
        max_overflow=0,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the session factory bound to the engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def ping(engine: AsyncEngine, timeout: float = STATEMENT_TIMEOUT_SECONDS) -> None:
    """Verify the database file can be opened and queried."""
    async with asyncio.timeout(timeout):
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Yield an async database session from the factory created at startup."""
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def execute(
    db: AsyncSession,
    statement: Executable,
    timeout: float = STATEMENT_TIMEOUT_SECONDS,
) -> Result[Any]:
    """
    Execute one statement, bounded by `timeout` seconds.

    Raises:
        ConstraintViolationError: The statement violated a table constraint.
        StatementTimeoutError: The statement was cancelled after the timeout.
        StoreError: Any other database failure.
    """
    try:
        async with asyncio.timeout(timeout):
            return await db.execute(statement)
    except TimeoutError as e:
        raise StatementTimeoutError(f"Statement exceeded {timeout:g}s") from e
    except IntegrityError as e:
        raise ConstraintViolationError(str(e.orig)) from e
    except SQLAlchemyError as e:
        raise StoreError(str(e)) from e


async def commit(db: AsyncSession, timeout: float = STATEMENT_TIMEOUT_SECONDS) -> None:
    """Commit the session's transaction, with the same error mapping as `execute`."""
    try:
        async with asyncio.timeout(timeout):
            await db.commit()
    except TimeoutError as e:
        raise StatementTimeoutError(f"Commit exceeded {timeout:g}s") from e
    except IntegrityError as e:
        raise ConstraintViolationError(str(e.orig)) from e
    except SQLAlchemyError as e:
        raise StoreError(str(e)) from e
