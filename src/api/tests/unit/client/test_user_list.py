"""Unit tests for the read-only user list client.

HTTP is served by an httpx.MockTransport and output is captured with a
recording rich Console.
"""

from __future__ import annotations

import httpx
import pytest
from rich.console import Console

from client.user_list import (
    HEADLINE_ALL,
    HEADLINE_SINGLE,
    UnexpectedStatusError,
    UserEntry,
    UserListClient,
    entry_label,
    render,
)

USERS = [
    {"id": 1, "name": "Alice", "username": "alice", "email": "alice@example.com"},
    {"id": 2, "name": "Bob", "username": "bob", "email": "bob@example.com"},
]


def handler(request: httpx.Request) -> httpx.Response:
    if request.method != "GET":
        return httpx.Response(405)
    if request.url.path == "/users":
        return httpx.Response(200, json=USERS)
    for user in USERS:
        if request.url.path == f"/users/{user['id']}":
            return httpx.Response(200, json=user)
    return httpx.Response(404, json={"detail": "Not Found"})


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def client(requests_seen) -> UserListClient:
    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return handler(request)

    http = httpx.Client(
        base_url="http://api.test", transport=httpx.MockTransport(recording_handler)
    )
    return UserListClient(http_client=http)


def recording_console() -> Console:
    return Console(record=True, width=120, color_system=None)


class TestFetch:
    def test_fetches_collection(self, client):
        users = client.fetch()

        assert [u.username for u in users] == ["alice", "bob"]
        assert users[0] == UserEntry(1, "Alice", "alice", "alice@example.com")

    def test_fetches_single_user_as_one_entry_list(self, client):
        users = client.fetch(2)

        assert users == [UserEntry(2, "Bob", "bob", "bob@example.com")]

    def test_only_issues_get_requests(self, client, requests_seen):
        client.fetch()
        client.fetch(1)

        assert {r.method for r in requests_seen} == {"GET"}
        assert [r.url.path for r in requests_seen] == ["/users", "/users/1"]

    def test_non_200_raises_with_status(self, client):
        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.fetch(99)

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "Unexpected server response status code 404"

    def test_transport_failure_raises_http_error(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        http = httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(refuse))

        with UserListClient(http_client=http) as client:
            with pytest.raises(httpx.HTTPError):
                client.fetch()

    def test_ignores_unknown_fields(self):
        entry = UserEntry.from_json({**USERS[0], "password": "leaked"})
        assert not hasattr(entry, "password")


class TestRender:
    def test_collection_lists_usernames(self, client):
        console = recording_console()

        render(console, client.fetch())

        text = console.export_text()
        assert text.splitlines()[0] == HEADLINE_ALL
        assert "alice" in text
        assert "/users/1" in text
        assert "/users/2" in text
        assert "alice@example.com" not in text

    def test_single_user_shows_details(self, client):
        console = recording_console()

        render(console, client.fetch(1), user_id=1)

        text = console.export_text()
        assert text.splitlines()[0] == HEADLINE_SINGLE
        assert "Alice (alice) with the email alice@example.com" in text

    def test_empty_collection_prints_headline_only(self):
        console = recording_console()

        render(console, [])

        assert console.export_text().strip() == HEADLINE_ALL

    def test_markup_in_user_data_is_escaped(self):
        console = recording_console()
        entry = UserEntry(3, "[bold]Eve[/bold]", "[red]eve", "eve@example.com")

        render(console, [entry], user_id=3)

        assert "[bold]Eve[/bold] ([red]eve)" in console.export_text()


class TestEntryLabel:
    def test_list_mode_is_username(self):
        entry = UserEntry(1, "Alice", "alice", "alice@example.com")
        assert entry_label(entry, single=False) == "alice"

    def test_single_mode_has_full_details(self):
        entry = UserEntry(1, "Alice", "alice", "alice@example.com")
        assert entry_label(entry, single=True) == (
            "Alice (alice) with the email alice@example.com"
        )
