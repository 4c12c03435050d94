"""Application services for the users context.

Application services orchestrate the repository and credential policy to
fulfill use cases. They are the "front door" to the users context.
"""

from users.application.services.user_service import UserService

__all__ = [
    "UserService",
]
