"""
Pytest configuration and fixtures
"""

import asyncio
import os
import sys
import tempfile
from collections.abc import AsyncGenerator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120


# Tests run against a throwaway SQLite file unless TEST_DATABASE_URL is set
def get_test_database_url():
    test_url = os.getenv("TEST_DATABASE_URL")
    if test_url:
        return test_url
    return f"sqlite+aiosqlite:///{os.path.join(tempfile.mkdtemp(), 'test.db')}"


TEST_DATABASE_URL = get_test_database_url()

# Settings are read at import time; configure them BEFORE importing the app
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_JSON", "false")

from app.database import Base  # noqa: E402
from app.models.user import User  # noqa: E402, F401

# NullPool: the TestClient and pytest-asyncio run on different event loops
test_engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)

TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

# Now import and patch the app's database components
import app.database as database_module  # noqa: E402
from main import app  # noqa: E402

database_module.engine = test_engine
database_module.AsyncSessionLocal = TestSessionLocal


async def reset_schema():
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(scope="function")
async def setup_test_database():
    """Create a fresh schema for each async test that needs it."""
    await reset_schema()
    yield


@pytest.fixture(scope="function")
async def test_db(setup_test_database) -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
def client():
    """Test client with a fresh schema; cookies persist across its requests."""
    asyncio.run(reset_schema())
    return TestClient(app)


@pytest.fixture
def user_store():
    from utils.mocks import InMemoryUserStore

    return InMemoryUserStore()


@pytest.fixture
def session_store():
    from utils.mocks import RecordingSession

    return RecordingSession()


@pytest.fixture
def session(session_store):
    from app.session import SessionSink

    return SessionSink(session_store)
