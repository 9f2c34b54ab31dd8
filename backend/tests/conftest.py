"""
NoteShelf Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite +
       StaticPool), so managers run against a real store without Postgres.

Fixture Hierarchy (all function-scoped):
    ├── test_engine:   async engine with tables created
    ├── db_session:    AsyncSession bound to test_engine
    ├── category_manager / note_manager: managers around db_session
    └── test_client:   HTTPX AsyncClient against a fresh app whose
                       get_db_session dependency points at test_engine
"""

import os

# Override settings BEFORE any noteshelf import creates the engine
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["STRICT_CATEGORY_REFERENCES"] = "false"
os.environ["CORS_ORIGINS"] = "*"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from noteshelf.database import create_tables, get_db_session
from noteshelf.services.category_manager import CategoryManager
from noteshelf.services.note_manager import NoteManager


@pytest_asyncio.fixture
async def test_engine():
    """A private in-memory database; StaticPool keeps the single connection alive."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def category_manager(db_session):
    return CategoryManager(db_session)


@pytest_asyncio.fixture
async def note_manager(db_session):
    return NoteManager(db_session)


@pytest_asyncio.fixture
async def test_client(test_engine):
    """
    HTTPX AsyncClient talking to a fresh app over ASGITransport.

    get_db_session is overridden with the same commit/rollback contract,
    bound to the test engine.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    from noteshelf.main import create_app

    factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
