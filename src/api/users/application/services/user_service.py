"""User application service for the users context.

Implements the five CRUD use cases. Each use case runs in its own
transaction, so a failure part-way through leaves the stored record
exactly as it was.
"""

from __future__ import annotations

from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from users.application.observability import DefaultUserServiceProbe, UserServiceProbe
from users.application.security import issue_credential
from users.application.value_objects import UserUpdate
from users.domain.aggregates import User
from users.domain.value_objects import UserProfile
from users.ports.exceptions import (
    DuplicateUsernameError,
    UserIdMismatchError,
    UserNotFoundError,
)
from users.ports.repositories import IUserRepository


class UserService:
    """Application service for user management."""

    def __init__(
        self,
        user_repository: IUserRepository,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
        credential_issuer: Callable[[], str] | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
            credential_issuer: Produces the credential stored on create and
                update (defaults to a bcrypt-hashed random secret)
        """
        self._user_repository = user_repository
        self._session = session
        self._probe = probe or DefaultUserServiceProbe()
        self._issue_credential = credential_issuer or issue_credential

    async def list_users(self) -> list[User]:
        """Return every stored user."""
        async with self._session.begin():
            users = await self._user_repository.find_all()

        self._probe.users_listed(len(users))
        return users

    async def get_user(self, user_id: int) -> User:
        """Return the user with ``user_id``.

        Raises:
            UserNotFoundError: If no such user exists
        """
        async with self._session.begin():
            user = await self._user_repository.find_by_id(user_id)

        if user is None:
            self._probe.user_not_found(user_id, operation="get")
            raise UserNotFoundError(user_id)

        self._probe.user_fetched(user_id)
        return user

    async def create_user(self, profile: UserProfile) -> User:
        """Create a user from client-supplied fields.

        The id comes from the store and the credential from the server.

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        try:
            async with self._session.begin():
                user = await self._user_repository.insert(
                    profile, self._issue_credential()
                )
        except DuplicateUsernameError:
            self._probe.username_conflict(profile.username, operation="create")
            raise

        self._probe.user_created(user.id, user.username)
        return user

    async def delete_user(self, user_id: int) -> None:
        """Delete the user with ``user_id`` permanently.

        Raises:
            UserNotFoundError: If no such user exists
        """
        async with self._session.begin():
            deleted = await self._user_repository.delete(user_id)

        if not deleted:
            self._probe.user_not_found(user_id, operation="delete")
            raise UserNotFoundError(user_id)

        self._probe.user_deleted(user_id)

    async def update_user(self, user_id: int, update: UserUpdate) -> User:
        """Replace the fields of the user at ``user_id``.

        The body id must equal the path id; this is checked before any
        field is merged or written. The stored credential is always
        re-issued and never taken from the request.

        Args:
            user_id: The id from the request path (the only id authority)
            update: The request body

        Raises:
            UserNotFoundError: If no such user exists
            UserIdMismatchError: If ``update.id`` differs from ``user_id``
            DuplicateUsernameError: If the new username belongs to another user
        """
        try:
            async with self._session.begin():
                current = await self._user_repository.find_by_id(user_id)
                if current is None:
                    self._probe.user_not_found(user_id, operation="update")
                    raise UserNotFoundError(user_id)

                if update.id != current.id:
                    self._probe.user_id_mismatch(path_id=user_id, body_id=update.id)
                    raise UserIdMismatchError(path_id=user_id, body_id=update.id)

                profile = update.merge_into(current.profile)
                user = await self._user_repository.update(
                    current, profile, self._issue_credential()
                )
        except DuplicateUsernameError as e:
            self._probe.username_conflict(e.username, operation="update")
            raise

        self._probe.user_updated(user.id, user.username)
        return user
