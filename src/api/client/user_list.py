"""Read-only client that lists users served by the API.

Mirrors what a browser view of ``/users`` shows: with no id it fetches the
whole collection, with an id it fetches one user and renders it as a
single-entry list. It never mutates data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from rich.console import Console
from rich.markup import escape

DEFAULT_API_URL = "http://localhost:4000"

HEADLINE_ALL = "This is a list of all available users delivered by the API"
HEADLINE_SINGLE = "This is just a single user delivered by the API"


class UnexpectedStatusError(Exception):
    """The server answered, but not with 200 OK."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected server response status code {status_code}")
        self.status_code = status_code


@dataclass(frozen=True)
class UserEntry:
    """A user as delivered by the API."""

    id: int
    name: str
    username: str
    email: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> UserEntry:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            username=data["username"],
            email=data["email"],
        )

    @property
    def path(self) -> str:
        return f"/users/{self.id}"


class UserListClient:
    """Fetches users from the API over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Create a client.

        Args:
            base_url: Root URL of the API
            http_client: Pre-configured client (tests pass one with a mock transport)
            timeout: Request timeout in seconds when building our own client
        """
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def fetch(self, user_id: int | None = None) -> list[UserEntry]:
        """Fetch all users, or just the one with ``user_id``.

        Raises:
            UnexpectedStatusError: If the API does not answer 200
            httpx.HTTPError: If no response arrived at all
        """
        path = "/users" if user_id is None else f"/users/{user_id}"
        response = self._http.get(path)
        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(response.status_code)

        payload = response.json()
        if user_id is None:
            return [UserEntry.from_json(item) for item in payload]
        return [UserEntry.from_json(payload)]

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> UserListClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def headline(user_id: int | None) -> str:
    return HEADLINE_ALL if user_id is None else HEADLINE_SINGLE


def entry_label(user: UserEntry, single: bool) -> str:
    """Text shown for one user: the username in list mode, full details otherwise."""
    if not single:
        return user.username
    return f"{user.name} ({user.username}) with the email {user.email}"


def render(console: Console, users: list[UserEntry], user_id: int | None = None) -> None:
    """Print the headline and one bullet per user, each linking to its resource."""
    single = user_id is not None
    console.print(headline(user_id))
    for user in users:
        label = escape(entry_label(user, single))
        console.print(f"  • [link={user.path}]{label}[/link] [dim]{user.path}[/dim]")
