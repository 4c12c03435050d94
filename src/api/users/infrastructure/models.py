"""SQLAlchemy ORM model for the users table.

The table definition must stay in step with the Alembic revision that
creates it (``infrastructure/migrations/versions``).
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin

USERNAME_INDEX = "ix_users_username"

# Largest value a BIGINT primary key can hold
MAX_USER_ID = 2**63 - 1


class UserModel(Base, TimestampMixin):
    """ORM model for the users table.

    ``id`` is an auto-incrementing 64-bit integer assigned on insert. ``username``
    carries a unique index whose name is used to recognise constraint
    violations.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(id={self.id}, username={self.username})>"
