"""Unit tests for the User aggregate and UserProfile value object."""

from dataclasses import FrozenInstanceError

import pytest

from users.domain.aggregates import User
from users.domain.value_objects import UserProfile


@pytest.fixture
def user() -> User:
    return User(
        id=7,
        name="Alice Liddell",
        username="alice",
        email="alice@example.com",
        password="$2b$12$storedcredentialhash",
    )


class TestUser:
    """Tests for the User record."""

    def test_profile_carries_editable_fields(self, user):
        """profile should expose name, username and email only."""
        assert user.profile == UserProfile(
            name="Alice Liddell",
            username="alice",
            email="alice@example.com",
        )

    def test_repr_hides_credential(self, user):
        """The credential must not show up when a user is logged."""
        assert "storedcredentialhash" not in repr(user)
        assert "alice" in repr(user)

    def test_str(self, user):
        assert str(user) == "User(7, alice)"

    def test_is_immutable(self, user):
        """Records are replaced, never edited in place."""
        with pytest.raises(FrozenInstanceError):
            user.username = "mallory"  # type: ignore[misc]

    def test_equality_includes_credential(self, user):
        other = User(
            id=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
            password="different",
        )
        assert user != other


class TestUserProfile:
    """Tests for the UserProfile value object."""

    def test_equal_by_value(self):
        assert UserProfile("A", "a", "a@x") == UserProfile("A", "a", "a@x")

    def test_is_immutable(self):
        profile = UserProfile("A", "a", "a@x")
        with pytest.raises(FrozenInstanceError):
            profile.name = "B"  # type: ignore[misc]
