"""End-to-end behaviour of the users API against an in-memory store.

Runs the real application, routes and service; only the repository and
session are replaced, so transaction rollback and username uniqueness
behave as they do against PostgreSQL.
"""

from __future__ import annotations

from itertools import count
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from main import create_app
from tests.unit.users.fakes import InMemorySession, InMemoryUserRepository
from users.application.services import UserService
from users.dependencies import get_user_service

ALICE = {"name": "Alice", "username": "alice", "email": "alice@example.com"}
BOB = {"name": "Bob", "username": "bob", "email": "bob@example.com"}


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session(repository) -> InMemorySession:
    return InMemorySession(repository)


@pytest.fixture
def client(repository, session) -> TestClient:
    credentials = count(1)
    service = UserService(
        user_repository=repository,
        session=session,  # type: ignore[arg-type]
        credential_issuer=lambda: f"credential-{next(credentials)}",
    )
    # A sessionmaker is never needed once get_user_service is overridden.
    app = create_app(sessionmaker=object())  # type: ignore[arg-type]
    app.dependency_overrides[get_user_service] = lambda: service
    return TestClient(app)


def create(client: TestClient, body: dict) -> dict:
    response = client.post("/users", json=body)
    assert response.status_code == 201
    return response.json()


class TestCreateThenRead:
    def test_created_user_is_readable_at_location(self, client):
        response = client.post("/users", json=ALICE)

        assert response.status_code == 201
        location = response.headers["Location"]
        fetched = client.get(location)
        assert fetched.status_code == 200
        assert fetched.json() == {"id": response.json()["id"], **ALICE}

    def test_list_contains_every_created_user(self, client):
        create(client, ALICE)
        create(client, BOB)

        usernames = {user["username"] for user in client.get("/users").json()}

        assert usernames == {"alice", "bob"}

    def test_ids_are_distinct(self, client):
        first = create(client, ALICE)
        second = create(client, BOB)
        assert first["id"] != second["id"]

    def test_empty_store_lists_nothing(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == []


class TestCredentialNeverExposed:
    def test_no_endpoint_returns_password(self, client, repository):
        user = create(client, ALICE)
        path = f"/users/{user['id']}"
        responses = [
            client.get("/users").json()[0],
            client.get(path).json(),
            client.put(path, json={"id": user["id"], "name": "Alicia"}).json(),
        ]

        assert all("password" not in body for body in responses)
        assert repository.rows[user["id"]].password.startswith("credential-")

    def test_credential_reissued_on_update(self, client, repository):
        user = create(client, ALICE)
        before = repository.rows[user["id"]].password

        client.put(f"/users/{user['id']}", json={"id": user["id"], "password": before})

        assert repository.rows[user["id"]].password != before


class TestUsernameUniqueness:
    def test_duplicate_create_is_rejected_and_store_unchanged(self, client, repository):
        create(client, ALICE)
        snapshot = dict(repository.rows)

        response = client.post("/users", json={**BOB, "username": "alice"})

        assert response.status_code == 409
        assert repository.rows == snapshot

    def test_update_onto_taken_username_is_rejected(self, client, repository):
        create(client, ALICE)
        bob = create(client, BOB)
        snapshot = dict(repository.rows)

        response = client.put(
            f"/users/{bob['id']}", json={"id": bob["id"], "username": "alice"}
        )

        assert response.status_code == 409
        assert repository.rows == snapshot

    def test_keeping_own_username_is_allowed(self, client):
        alice = create(client, ALICE)

        response = client.put(
            f"/users/{alice['id']}",
            json={"id": alice["id"], "username": "alice", "name": "Alice L."},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice L."


class TestUpdate:
    def test_mismatched_body_id_changes_nothing(self, client, repository, session):
        alice = create(client, ALICE)
        bob = create(client, BOB)
        snapshot = dict(repository.rows)

        response = client.put(
            f"/users/{alice['id']}", json={"id": bob["id"], "name": "Mallory"}
        )

        assert response.status_code == 409
        assert repository.rows == snapshot
        assert session.rollbacks == 1

    def test_update_missing_user_is_404(self, client):
        response = client.put("/users/42", json={"id": 42, **ALICE})
        assert response.status_code == 404

    def test_update_is_visible_on_read(self, client):
        alice = create(client, ALICE)
        path = f"/users/{alice['id']}"

        client.put(path, json={"id": alice["id"], "email": "new@example.com"})

        assert client.get(path).json() == {
            "id": alice["id"],
            "name": "Alice",
            "username": "alice",
            "email": "new@example.com",
        }


class TestDelete:
    def test_deleted_user_is_gone(self, client):
        alice = create(client, ALICE)
        path = f"/users/{alice['id']}"

        assert client.delete(path).status_code == 200
        assert client.get(path).status_code == 404
        assert client.delete(path).status_code == 404
        assert client.get("/users").json() == []

    def test_username_is_free_after_delete(self, client):
        alice = create(client, ALICE)
        client.delete(f"/users/{alice['id']}")

        again = create(client, ALICE)

        assert again["id"] != alice["id"]


def test_walkthrough(client):
    ada = {"name": "Ada", "username": "ada", "email": "ada@x.io"}

    created = client.post("/users", json=ada)
    assert created.status_code == 201
    assert created.headers["Location"] == "/users/1"

    assert client.get("/users/1").json() == {"id": 1, **ada}

    assert client.put("/users/1", json={"id": 2, **ada}).status_code == 409

    renamed = client.put("/users/1", json={"id": 1, **ada, "name": "Ada L."})
    assert renamed.status_code == 200
    assert client.get("/users/1").json()["name"] == "Ada L."

    assert client.delete("/users/1").status_code == 200
    assert client.get("/users/1").status_code == 404


class TestIdsBeyondTheColumnRange:
    """Path ids too large for the id column are missing users, not errors."""

    PATH = "/users/99999999999999999999"

    @pytest.fixture
    def db_client(self, transactional_session) -> TestClient:
        from sqlalchemy.exc import DataError

        from users.infrastructure.user_repository import UserRepository

        # asyncpg rejects such a parameter; any query reaching it would fail
        transactional_session.execute = AsyncMock(
            side_effect=DataError("SELECT ...", {}, Exception("out of int64 range"))
        )
        service = UserService(
            user_repository=UserRepository(transactional_session),
            session=transactional_session,
        )
        app = create_app(sessionmaker=object())  # type: ignore[arg-type]
        app.dependency_overrides[get_user_service] = lambda: service
        return TestClient(app, raise_server_exceptions=False)

    def test_get_is_404(self, db_client):
        assert db_client.get(self.PATH).status_code == 404

    def test_put_is_404(self, db_client):
        response = db_client.put(
            self.PATH, json={"id": 99999999999999999999, **ALICE}
        )
        assert response.status_code == 404

    def test_delete_is_404(self, db_client):
        assert db_client.delete(self.PATH).status_code == 404

    def test_in_memory_store_agrees(self, client):
        assert client.get(self.PATH).status_code == 404
        assert client.delete(self.PATH).status_code == 404
