"""Domain-Oriented Observability for users infrastructure."""

from users.infrastructure.observability.repository_probe import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "DefaultUserRepositoryProbe",
    "UserRepositoryProbe",
]
