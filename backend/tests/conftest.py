"""Shared fixtures: a temporary SQLite file per test, the app and an HTTP client."""
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from api.main import create_app
from core.config import Settings
from db.session import create_engine_for, create_session_factory
from models import init_schema


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh database file under a not-yet-created directory."""
    return Settings(
        _env_file=None,
        sqlite_path=str(tmp_path / "data" / "personal_dash.db"),
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI]:
    """Application with its lifespan (engine, schema, renderer) running."""
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Engine with the schema created, for service-level tests."""
    db_engine = create_engine_for(settings)
    await init_schema(db_engine)
    try:
        yield db_engine
    finally:
        await db_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """A session on the test engine."""
    async with create_session_factory(engine)() as session:
        yield session
