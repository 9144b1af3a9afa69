"""
Auth service tests.

Covers bcrypt hashing, verification and session id / expiry helpers.
"""

import uuid
from datetime import datetime, timedelta

from api.config import config
from api.services.auth import (
    hash_password,
    verify_password,
    new_session_id,
    session_expiry,
)


class TestPasswordHashing:

    def test_hash_uses_configured_cost(self):
        hashed = hash_password("pw")
        assert hashed.startswith(f"$2b${config.BCRYPT_ROUNDS:02d}$")

    def test_default_cost_factor_is_ten(self):
        assert config.BCRYPT_ROUNDS == 10

    def test_hash_is_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_verify_roundtrip(self):
        hashed = hash_password("correct horse")
        assert verify_password("correct horse", hashed) is True
        assert verify_password("battery staple", hashed) is False

    def test_verify_malformed_hash(self):
        assert verify_password("pw", "not-a-bcrypt-hash") is False


class TestSessionHelpers:

    def test_session_id_is_uuid(self):
        session_id = new_session_id()
        assert str(uuid.UUID(session_id)) == session_id

    def test_session_ids_differ(self):
        assert len({new_session_id() for _ in range(50)}) == 50

    def test_expiry_is_ttl_after_issue(self):
        issued = datetime(2024, 5, 1, 12, 0, 0)
        assert session_expiry(issued) == datetime(2024, 5, 2, 12, 0, 0)

    def test_expiry_defaults_to_now(self):
        before = datetime.now()
        expires = session_expiry()
        after = datetime.now()
        ttl = timedelta(hours=config.SESSION_TTL_HOURS)
        assert before + ttl <= expires <= after + ttl
