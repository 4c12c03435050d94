"""Domain-Oriented Observability for the users application layer."""

from users.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "DefaultUserServiceProbe",
    "UserServiceProbe",
]
