"""User aggregate for the users context."""

from __future__ import annotations

from dataclasses import dataclass, field

from users.domain.value_objects import UserProfile


@dataclass(frozen=True)
class User:
    """A persisted user record.

    ``id`` is assigned by the store when the record is inserted and never
    changes afterwards. ``password`` holds the server-derived credential
    and must never leave the server, so it is kept out of the repr.
    """

    id: int
    name: str
    username: str
    email: str
    password: str = field(repr=False)

    @property
    def profile(self) -> UserProfile:
        """Return the client-editable fields of this record."""
        return UserProfile(name=self.name, username=self.username, email=self.email)

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.id}, {self.username})"
