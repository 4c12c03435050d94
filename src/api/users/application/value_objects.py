"""Application-layer value objects for the users context."""

from __future__ import annotations

from dataclasses import dataclass

from users.domain.value_objects import UserProfile


@dataclass(frozen=True)
class UserUpdate:
    """An update request as submitted by a client.

    ``id`` is the identity the client claims to be updating; it is only
    compared against the path id, never written. Profile fields left as
    None keep their stored values.
    """

    id: int
    name: str | None = None
    username: str | None = None
    email: str | None = None

    def merge_into(self, current: UserProfile) -> UserProfile:
        """Return ``current`` with every supplied field replaced."""
        return UserProfile(
            name=self.name if self.name is not None else current.name,
            username=self.username if self.username is not None else current.username,
            email=self.email if self.email is not None else current.email,
        )
