"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations. Expected business outcomes
(not found, conflicts) are recorded at info level; they are not errors.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def users_listed(self, count: int) -> None:
        """Record that the user list was served."""
        ...

    def user_fetched(self, user_id: int) -> None:
        """Record that a single user was served."""
        ...

    def user_created(self, user_id: int, username: str) -> None:
        """Record that a user was created."""
        ...

    def user_updated(self, user_id: int, username: str) -> None:
        """Record that a user was updated."""
        ...

    def user_deleted(self, user_id: int) -> None:
        """Record that a user was deleted."""
        ...

    def user_not_found(self, user_id: int, operation: str) -> None:
        """Record that an operation targeted a missing user."""
        ...

    def username_conflict(self, username: str, operation: str) -> None:
        """Record that an operation was rejected for a taken username."""
        ...

    def user_id_mismatch(self, path_id: int, body_id: int) -> None:
        """Record that an update body claimed a different id than the path."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def users_listed(self, count: int) -> None:
        """Record that the user list was served."""
        self._logger.debug("users_listed", count=count)

    def user_fetched(self, user_id: int) -> None:
        """Record that a single user was served."""
        self._logger.debug("user_fetched", user_id=user_id)

    def user_created(self, user_id: int, username: str) -> None:
        """Record that a user was created."""
        self._logger.info("user_created", user_id=user_id, username=username)

    def user_updated(self, user_id: int, username: str) -> None:
        """Record that a user was updated."""
        self._logger.info("user_updated", user_id=user_id, username=username)

    def user_deleted(self, user_id: int) -> None:
        """Record that a user was deleted."""
        self._logger.info("user_deleted", user_id=user_id)

    def user_not_found(self, user_id: int, operation: str) -> None:
        """Record that an operation targeted a missing user."""
        self._logger.info("user_not_found", user_id=user_id, operation=operation)

    def username_conflict(self, username: str, operation: str) -> None:
        """Record that an operation was rejected for a taken username."""
        self._logger.info(
            "username_conflict", username=username, operation=operation
        )

    def user_id_mismatch(self, path_id: int, body_id: int) -> None:
        """Record that an update body claimed a different id than the path."""
        self._logger.info("user_id_mismatch", path_id=path_id, body_id=body_id)
