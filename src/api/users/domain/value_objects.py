"""Value objects for the users domain.

Value objects are immutable descriptors that carry the client-editable
part of a user record between layers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """The fields of a user that a client is allowed to supply.

    Identity and credential are deliberately absent: the store assigns
    the id and the server derives the credential.
    """

    name: str
    username: str
    email: str
