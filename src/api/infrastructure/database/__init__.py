"""Database infrastructure - shared engine and session primitives."""

from infrastructure.database.exceptions import (
    DatabaseError,
    DatabaseNotInitializedError,
)

__all__ = [
    "DatabaseError",
    "DatabaseNotInitializedError",
]
