"""
Auth service

Password hashing and admin session token issuance.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

import bcrypt

from api.config import config


def hash_password(plain: str) -> str:
    """Hash a password with bcrypt using the configured cost factor"""
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    Check a password against a stored bcrypt hash

    The comparison is constant-time. A malformed stored hash counts as a
    mismatch rather than an error.
    """
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def new_session_id() -> str:
    """Opaque, random admin session identifier"""
    return str(uuid4())


def session_expiry(now: Optional[datetime] = None) -> datetime:
    """
    Expiry timestamp for a session issued at `now`

    Args:
        now: issue time, defaults to the current local time

    Returns:
        now + SESSION_TTL_HOURS
    """
    if now is None:
        now = datetime.now()
    return now + timedelta(hours=config.SESSION_TTL_HOURS)
