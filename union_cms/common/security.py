"""
Password hashing helpers built on bcrypt.
Passwords are truncated to 72 bytes because bcrypt ignores anything past that limit.
"""

from __future__ import annotations

import bcrypt

BCRYPT_ROUNDS = 10


def _truncate_to_72_bytes(password: str) -> bytes:
    encoded = password.encode("utf-8")
    if len(encoded) > 72:
        return encoded[:72]
    return encoded


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""

    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_truncate_to_72_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a bcrypt hash."""

    try:
        return bcrypt.checkpw(
            _truncate_to_72_bytes(plain_password),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
