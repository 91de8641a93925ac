"""
Booklist Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── db:            fresh SQLite schema (tables + indexes) per test
    ├── session:       AsyncSession on that schema
    ├── store:         SQLDocumentStore over `session`
    ├── test_client:   HTTPX AsyncClient against the FastAPI app
    ├── mock_store:    AsyncMock standing in for any DocumentStore
    └── book_payload / movie_payload / show_payload: valid request bodies
"""

import os
import tempfile

# Settings are read at import time: configure the environment BEFORE any
# `app` import so tests never touch a real database.
_test_dir = tempfile.mkdtemp(prefix="booklist_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_ENSURE_INDEXES"] = "false"

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

import app.models  # noqa: E402,F401  (registers tables with Base.metadata)
from app.database import Base, async_session_factory, engine  # noqa: E402
from app.main import app, ensure_indexes  # noqa: E402
from app.store import DocumentStore, SQLDocumentStore, get_store  # noqa: E402


@pytest_asyncio.fixture
async def db():
    """
    Creates the collection tables before the test and drops them after.

    Why per test: every test starts from empty collections, so ids,
    filters and uniqueness checks never see another test's records.
    """
    await ensure_indexes()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def session(db):
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def store(session):
    """A SQLDocumentStore on the test session. Tests commit explicitly when needed."""
    return SQLDocumentStore(session)


@pytest.fixture
def mock_store():
    """
    Provides a mock document store.

    Usage:
        async def test_get(mock_store):
            mock_store.find_one.return_value = {"id": "…", "title": "Dune", …}
            document = await service.get(mock_store, "…")
    """
    return AsyncMock(spec=DocumentStore)


@pytest_asyncio.fixture
async def test_client(db):
    """
    HTTPX AsyncClient wired to the app through ASGITransport.

    Usage:
        async def test_welcome(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def override_store():
    """
    Replaces the store dependency for one test.

    Usage:
        override_store(mock_store)
    """
    def _override(replacement: DocumentStore) -> None:
        app.dependency_overrides[get_store] = lambda: replacement

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def book_payload():
    return {"title": "Dune", "author": "Herbert", "isbn": "123", "image": "x.jpg"}


@pytest.fixture
def movie_payload():
    return {"title": "Alien", "director": "Ridley Scott", "image": "alien.jpg", "rating": 8.5}


@pytest.fixture
def show_payload():
    return {"title": "Severance", "director": "Ben Stiller", "image": "sev.jpg", "rating": 8.7}
