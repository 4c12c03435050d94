"""Repository protocols (ports) for the users context.

Repository protocols define the interface for persisting and retrieving
user records. Implementations translate storage-level constraint
violations into the domain exceptions in ``users.ports.exceptions``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from users.domain.aggregates import User
from users.domain.value_objects import UserProfile


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User record persistence.

    Transactions are owned by the caller; every method runs inside the
    caller's unit of work.
    """

    async def find_all(self) -> list[User]:
        """Return every stored user.

        No ordering is guaranteed to callers.
        """
        ...

    async def find_by_id(self, user_id: int) -> User | None:
        """Retrieve a user by primary key.

        Args:
            user_id: The store-assigned identifier

        Returns:
            The User, or None if not found
        """
        ...

    async def insert(self, profile: UserProfile, password: str) -> User:
        """Insert a new user and assign it a fresh id.

        Args:
            profile: Client-supplied fields
            password: Server-derived credential to store

        Returns:
            The persisted User including its new id

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        ...

    async def update(self, user: User, profile: UserProfile, password: str) -> User:
        """Replace the profile fields and credential of an existing user.

        Args:
            user: The currently stored record
            profile: Replacement fields
            password: Server-derived credential to store

        Returns:
            The updated User

        Raises:
            DuplicateUsernameError: If the new username belongs to another user
        """
        ...

    async def delete(self, user_id: int) -> bool:
        """Delete a user permanently.

        Args:
            user_id: The identifier of the user to delete

        Returns:
            True if deleted, False if not found
        """
        ...
