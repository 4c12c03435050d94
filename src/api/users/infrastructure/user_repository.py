"""PostgreSQL implementation of IUserRepository.

The unique index on ``users.username`` is the single authority on username
uniqueness: a collision is detected by the database at flush time and
translated into DuplicateUsernameError, so concurrent writers cannot both
succeed.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from users.domain.aggregates import User
from users.domain.value_objects import UserProfile
from users.infrastructure.models import MAX_USER_ID, USERNAME_INDEX, UserModel
from users.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from users.ports.exceptions import DuplicateUsernameError
from users.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """SQLAlchemy-backed repository for User records.

    Every method works inside the caller's transaction. Writes are flushed
    immediately so constraint violations surface from the call that caused
    them rather than at commit.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def find_all(self) -> list[User]:
        """Return every stored user (ascending id)."""
        stmt = select(UserModel).order_by(UserModel.id)
        result = await self._session.execute(stmt)
        users = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.users_listed(len(users))
        return users

    async def find_by_id(self, user_id: int) -> User | None:
        """Retrieve a user by primary key.

        Args:
            user_id: The store-assigned identifier

        Returns:
            The User, or None if not found
        """
        model = await self._get_model(user_id)

        if model is None:
            self._probe.user_not_found(user_id)
            return None

        self._probe.user_retrieved(user_id)
        return self._to_domain(model)

    async def insert(self, profile: UserProfile, password: str) -> User:
        """Insert a new user row; the database assigns the id.

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        model = UserModel(
            name=profile.name,
            username=profile.username,
            email=profile.email,
            password=password,
        )
        self._session.add(model)
        await self._flush(profile.username)

        self._probe.user_inserted(model.id, model.username)
        return self._to_domain(model)

    async def update(self, user: User, profile: UserProfile, password: str) -> User:
        """Overwrite profile fields and credential of an existing row.

        Raises:
            DuplicateUsernameError: If the new username belongs to another user
            ValueError: If the row vanished since ``user`` was read
        """
        model = await self._get_model(user.id)
        if model is None:
            raise ValueError(f"User {user.id} no longer exists")

        model.name = profile.name
        model.username = profile.username
        model.email = profile.email
        model.password = password
        await self._flush(profile.username)

        self._probe.user_updated(model.id, model.username)
        return self._to_domain(model)

    async def delete(self, user_id: int) -> bool:
        """Delete a user row permanently.

        Returns:
            True if deleted, False if not found
        """
        model = await self._get_model(user_id)
        if model is None:
            self._probe.user_not_found(user_id)
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.user_deleted(user_id)
        return True

    async def _get_model(self, user_id: int) -> UserModel | None:
        """Load a row by id; ids the column cannot hold are simply absent."""
        if not 1 <= user_id <= MAX_USER_ID:
            return None
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _flush(self, username: str) -> None:
        """Flush pending writes, translating a username collision."""
        try:
            await self._session.flush()
        except IntegrityError as e:
            if USERNAME_INDEX in str(e):
                self._probe.duplicate_username(username)
                raise DuplicateUsernameError(username) from e
            raise

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            username=model.username,
            email=model.email,
            password=model.password,
        )
