"""FastAPI dependency providers for the users context.

Wires the request-scoped session into the repository and service so
routes never construct infrastructure themselves. Tests replace these
providers through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_session
from users.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from users.application.services import UserService
from users.infrastructure.user_repository import UserRepository
from users.ports.repositories import IUserRepository


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> IUserRepository:
    """Get UserRepository instance.

    Args:
        session: Async database session

    Returns:
        UserRepository bound to the request session
    """
    return UserRepository(session=session)


def get_user_service_probe() -> UserServiceProbe:
    """Get UserServiceProbe instance."""
    return DefaultUserServiceProbe()


def get_user_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    session: Annotated[AsyncSession, Depends(get_session)],
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Get UserService instance.

    The repository and the service share one session through FastAPI's
    per-request dependency cache.
    """
    return UserService(
        user_repository=user_repository,
        session=session,
        probe=probe,
    )
