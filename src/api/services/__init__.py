"""
Services

Password hashing and session token helpers.
"""

from .auth import (
    hash_password,
    verify_password,
    new_session_id,
    session_expiry,
)

__all__ = [
    "hash_password",
    "verify_password",
    "new_session_id",
    "session_expiry",
]
