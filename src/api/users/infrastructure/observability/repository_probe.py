"""Domain probe for user repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to user persistence.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class UserRepositoryProbe(Protocol):
    """Domain probe for user repository operations."""

    def user_inserted(self, user_id: int, username: str) -> None:
        """Record that a new user row was written."""
        ...

    def user_updated(self, user_id: int, username: str) -> None:
        """Record that a user row was rewritten."""
        ...

    def user_deleted(self, user_id: int) -> None:
        """Record that a user row was removed."""
        ...

    def user_retrieved(self, user_id: int) -> None:
        """Record that a user was retrieved."""
        ...

    def user_not_found(self, user_id: int) -> None:
        """Record that a user was not found."""
        ...

    def users_listed(self, count: int) -> None:
        """Record that all users were listed."""
        ...

    def duplicate_username(self, username: str) -> None:
        """Record that the unique username index rejected a write."""
        ...


class DefaultUserRepositoryProbe:
    """Default implementation of UserRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_inserted(self, user_id: int, username: str) -> None:
        """Record that a new user row was written."""
        self._logger.info("user_inserted", user_id=user_id, username=username)

    def user_updated(self, user_id: int, username: str) -> None:
        """Record that a user row was rewritten."""
        self._logger.info("user_updated", user_id=user_id, username=username)

    def user_deleted(self, user_id: int) -> None:
        """Record that a user row was removed."""
        self._logger.info("user_deleted", user_id=user_id)

    def user_retrieved(self, user_id: int) -> None:
        """Record that a user was retrieved."""
        self._logger.debug("user_retrieved", user_id=user_id)

    def user_not_found(self, user_id: int) -> None:
        """Record that a user was not found."""
        self._logger.debug("user_not_found", user_id=user_id)

    def users_listed(self, count: int) -> None:
        """Record that all users were listed."""
        self._logger.debug("users_listed", count=count)

    def duplicate_username(self, username: str) -> None:
        """Record that the unique username index rejected a write."""
        self._logger.info("duplicate_username", username=username)
