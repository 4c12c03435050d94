"""Pydantic models for user API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from users.application.value_objects import UserUpdate
from users.domain.aggregates import User
from users.domain.value_objects import UserProfile


class CreateUserRequest(BaseModel):
    """Request model for creating a user.

    Unknown keys (an ``id`` or ``password`` sent by the client, for
    instance) are dropped: the store assigns ids and the server derives
    credentials.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Display name", max_length=255)
    username: str = Field(..., description="Unique login name", max_length=255)
    email: str = Field(..., description="Contact email address", max_length=255)

    def to_domain(self) -> UserProfile:
        """Convert to the domain profile."""
        return UserProfile(name=self.name, username=self.username, email=self.email)


class UpdateUserRequest(BaseModel):
    """Request model for replacing a user.

    ``id`` must repeat the id from the path. Omitted profile fields keep
    their stored values; a ``password`` key is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Id of the user being updated")
    name: str | None = Field(
        default=None, description="Display name", max_length=255
    )
    username: str | None = Field(
        default=None, description="Unique login name", max_length=255
    )
    email: str | None = Field(
        default=None, description="Contact email address", max_length=255
    )

    def to_domain(self) -> UserUpdate:
        """Convert to the application-layer update."""
        return UserUpdate(
            id=self.id,
            name=self.name,
            username=self.username,
            email=self.email,
        )


class UserResponse(BaseModel):
    """Client-safe view of a user record (the credential is never included)."""

    id: int = Field(..., description="User id")
    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique login name")
    email: str = Field(..., description="Contact email address")

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        """Project a domain User onto the public view.

        Args:
            user: User record

        Returns:
            UserResponse without the credential
        """
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
        )
