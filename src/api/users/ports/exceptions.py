"""Domain exceptions for the users context.

These exceptions represent the expected failure outcomes of store and
service operations. The presentation layer maps them to HTTP statuses.
"""


class UserNotFoundError(Exception):
    """Raised when no user record exists for the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class DuplicateUsernameError(Exception):
    """Raised when a write would create a second record with the same username.

    This is the store's constraint violation: the unique index on
    ``users.username`` rejected the insert or update.
    """

    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' already exists")
        self.username = username


class UserIdMismatchError(Exception):
    """Raised when an update body names a different id than the request path.

    The path id is the only authority on which record is being updated;
    a body asserting another id is rejected before anything is written.
    """

    def __init__(self, path_id: int, body_id: int) -> None:
        super().__init__(
            f"User id in body ({body_id}) does not match id in path ({path_id})"
        )
        self.path_id = path_id
        self.body_id = body_id
