"""Tests for the engine, schema creation and statement helpers."""
import asyncio
from pathlib import Path

import pytest
from sqlalchemy import insert, inspect, select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from core.config import Settings
from core.exceptions import ConstraintViolationError, StatementTimeoutError, StoreError
from db.session import create_engine_for, execute, ping
from models import Category, init_schema


class _SlowSession:
    """Stands in for a session whose statement never finishes in time."""

    def __init__(self) -> None:
        self.cancelled = False

    async def execute(self, _statement: object) -> None:
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


async def test__create_engine_for__creates_parent_directory(tmp_path: Path) -> None:
    """The directory holding the database file is created if missing."""
    settings = Settings(_env_file=None, sqlite_path=str(tmp_path / "a" / "b" / "dash.db"))
    engine = create_engine_for(settings)
    try:
        assert (tmp_path / "a" / "b").is_dir()
        await ping(engine)
        assert (tmp_path / "a" / "b" / "dash.db").exists()
    finally:
        await engine.dispose()


async def test__engine__enforces_foreign_keys(engine: AsyncEngine) -> None:
    """Every pooled connection has foreign-key enforcement switched on."""
    async with engine.connect() as conn:
        result = await conn.execute(text("PRAGMA foreign_keys"))
        assert result.scalar_one() == 1


async def test__engine__single_connection_pool(engine: AsyncEngine) -> None:
    """The pool is capped at one connection."""
    assert engine.pool.size() == 1


async def test__init_schema__is_idempotent(engine: AsyncEngine, db_session: AsyncSession) -> None:
    """Running schema creation again keeps tables, indexes and data."""
    await execute(db_session, insert(Category).values(name="Dev", name_key="dev"))
    await db_session.commit()

    await init_schema(engine)
    await init_schema(engine)

    def _inspect(sync_conn: object) -> tuple[list[str], set[str]]:
        inspector = inspect(sync_conn)
        indexes = {ix["name"] for ix in inspector.get_indexes("links")}
        return sorted(inspector.get_table_names()), indexes

    async with engine.connect() as conn:
        tables, indexes = await conn.run_sync(_inspect)
    assert tables == ["categories", "links"]
    assert {"idx_links_category", "idx_links_name_category"} <= indexes

    result = await execute(db_session, select(Category.name))
    assert result.scalars().all() == ["Dev"]


async def test__execute__maps_unique_violation(db_session: AsyncSession) -> None:
    """Unique constraint failures become ConstraintViolationError."""
    await execute(db_session, insert(Category).values(name="Dev", name_key="dev"))
    with pytest.raises(ConstraintViolationError):
        await execute(db_session, insert(Category).values(name="DEV", name_key="dev"))


async def test__execute__maps_other_errors(db_session: AsyncSession) -> None:
    """Other database errors become StoreError."""
    with pytest.raises(StoreError) as exc_info:
        await execute(db_session, text("SELECT * FROM missing_table"))
    assert not isinstance(exc_info.value, ConstraintViolationError)


async def test__execute__times_out() -> None:
    """A statement exceeding the timeout is cancelled and raises StatementTimeoutError."""
    session = _SlowSession()
    with pytest.raises(StatementTimeoutError):
        await execute(session, select(1), timeout=0.01)  # type: ignore[arg-type]
    assert session.cancelled is True


async def test__ping__fails_for_unopenable_path(tmp_path: Path) -> None:
    """A path that cannot be opened as a database fails the ping."""
    directory = tmp_path / "not-a-file"
    directory.mkdir()
    engine = create_engine_for(Settings(_env_file=None, sqlite_path=str(directory)))
    try:
        with pytest.raises(Exception):  # noqa: B017
            await ping(engine)
    finally:
        await engine.dispose()
