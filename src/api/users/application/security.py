"""Credential derivation for user records.

The server alone decides what is stored in a user's credential column.
Each create and update stores a bcrypt hash of a freshly generated random
secret; nothing a client sends is ever used.
"""

import secrets

import bcrypt


def generate_credential_secret() -> str:
    """Generate 32 bytes of URL-safe random data."""
    return secrets.token_urlsafe(32)


def hash_credential(secret: str) -> str:
    """Hash a credential secret using bcrypt.

    Args:
        secret: The plaintext secret to hash

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(secret.encode(), bcrypt.gensalt()).decode()


def issue_credential() -> str:
    """Derive a new credential to store on a user record."""
    return hash_credential(generate_credential_secret())
