"""Ports (interfaces) for the users context."""

from users.ports.exceptions import (
    DuplicateUsernameError,
    UserIdMismatchError,
    UserNotFoundError,
)
from users.ports.repositories import IUserRepository

__all__ = [
    "DuplicateUsernameError",
    "IUserRepository",
    "UserIdMismatchError",
    "UserNotFoundError",
]
