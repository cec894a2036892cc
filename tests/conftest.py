"""Pytest configuration and fixtures for the dashboard admin service.

Tests run against an in-memory SQLite database (aiosqlite + StaticPool, so
every session shares one connection). HTTP tests use app.main:app with the
get_db dependency overridden to hand out sessions bound to that database.
"""

import os

# Must be set before app.main is imported (create_app reads settings).
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTO_CREATE_SCHEMA"] = "false"
os.environ["DEFAULT_PAGE_SIZE"] = "10"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings

get_settings.cache_clear()

from app.infrastructure.persistence import models  # noqa: F401  (register mappers)
from app.infrastructure.persistence.database import Base, get_db
from app.infrastructure.persistence.repositories import DashboardUserRepository
from app.application.services.dashboard_user_service import DashboardUserService
from app.main import app


@pytest.fixture
async def session_factory() -> async_sessionmaker[AsyncSession]:
    """Fresh in-memory database with the schema created; disposed after the test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Session for repository/integration tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def user_repo(db_session: AsyncSession) -> DashboardUserRepository:
    return DashboardUserRepository(db_session)


@pytest.fixture
def user_service(user_repo: DashboardUserRepository) -> DashboardUserService:
    return DashboardUserService(user_repo)


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), one DB session per request."""

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
