"""Database dependency injection for FastAPI.

The session factory is constructed once by the application lifespan (or
handed in by tests) and stored on ``app.state``; request handlers receive
sessions through these dependencies instead of reaching for module globals.
"""

from __future__ import annotations

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.exceptions import DatabaseNotInitializedError


def get_sessionmaker(request: Request) -> async_sessionmaker[AsyncSession]:
    """Return the session factory attached to the running application.

    Raises:
        DatabaseNotInitializedError: If the application lifespan has not
            configured one
    """
    sessionmaker = getattr(request.app.state, "sessionmaker", None)
    if sessionmaker is None:
        raise DatabaseNotInitializedError(
            "Database not initialized. Ensure app startup completed successfully."
        )
    return sessionmaker


async def get_session(
    sessionmaker: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_sessionmaker)
    ],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a request-scoped session (FastAPI dependency).

    The session is configured to NOT auto-commit. Callers must explicitly
    manage transactions using `async with session.begin()`.

    Yields:
        AsyncSession for database operations
    """
    async with sessionmaker() as session:
        yield session
