"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance. Run them with
``pytest -m integration``.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine, create_sessionmaker
from infrastructure.database.models import Base
from infrastructure.settings import DatabaseSettings

# Registers the users table on Base.metadata
import users.infrastructure.models  # noqa: F401


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        USERS_DB_HOST, USERS_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("USERS_DB_HOST", "localhost"),
        port=int(os.getenv("USERS_DB_PORT", "5432")),
        database=os.getenv("USERS_DB_DATABASE", "users"),
        username=os.getenv("USERS_DB_USERNAME", "users"),
        password=SecretStr(os.getenv("USERS_DB_PASSWORD", "users_dev_password")),
        pool_size=5,
    )


@pytest_asyncio.fixture
async def engine(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[AsyncEngine, None]:
    """Provide an engine against a users table that starts out empty."""
    engine = create_engine(integration_db_settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(text("TRUNCATE TABLE users RESTART IDENTITY"))

    yield engine

    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE TABLE users RESTART IDENTITY"))
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Provide a session factory for tests that need several sessions."""
    return create_sessionmaker(engine)


@pytest_asyncio.fixture
async def async_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async session for integration tests."""
    async with session_factory() as session:
        yield session
