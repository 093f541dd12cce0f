import sys
import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure project root is on sys.path so `import core` works without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from database.base import Database
from web.config import Settings


TEST_PASSWORD = "correct horse battery staple"
TEST_SECRET = "test-signing-secret"


@pytest.fixture
def settings() -> Settings:
    """Explicit test settings, independent of the environment and .env."""
    return Settings(
        _env_file=None,
        app_password=TEST_PASSWORD,
        jwt_secret=TEST_SECRET,
        jwt_expires_in="1h",
        db_path=":memory:",
        environment="test",
    )


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """Isolated in-memory database with the schema created."""
    db = Database.in_memory()
    await db.init()
    yield db
    await db.close()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests."""
    async with database.session_maker() as session:
        yield session
        await session.rollback()
