"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


@pytest.fixture
def transactional_session() -> MagicMock:
    """Provide a session whose ``begin()`` works as an async context manager.

    Exceptions raised inside the block propagate, as they do with a real
    session transaction.
    """
    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=transaction)
    transaction.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.begin.return_value = transaction
    return session
