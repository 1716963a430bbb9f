"""
Tests for bearer tokens and password hashing
"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from popcornpick.core.auth import TokenService, get_password_hash, verify_password
from popcornpick.core.exceptions import UnauthorizedException


@pytest.fixture
def token_service():
    return TokenService(secret_key="test-secret-key")


class TestTokenService:
    """Tests for issue/verify"""

    @pytest.mark.parametrize("user_id", [1, 42, 987654])
    def test_verify_returns_issued_user_id(self, token_service, user_id):
        token = token_service.issue(user_id)
        assert token_service.verify(token) == user_id

    def test_token_expires_after_seven_days(self, token_service):
        token = token_service.issue(7)
        payload = jwt.decode(token, "test-secret-key", algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())

    def test_expired_token_is_rejected(self, token_service):
        issued = datetime.now(timezone.utc) - timedelta(days=8)
        token = token_service.issue(7, now=issued)
        with pytest.raises(UnauthorizedException):
            token_service.verify(token)

    def test_token_signed_with_other_key_is_rejected(self, token_service):
        token = TokenService(secret_key="another-secret-key").issue(7)
        with pytest.raises(UnauthorizedException) as exc_info:
            token_service.verify(token)
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("token", ["", None])
    def test_missing_token_is_rejected(self, token_service, token):
        with pytest.raises(UnauthorizedException) as exc_info:
            token_service.verify(token)
        assert exc_info.value.message == "No token"

    def test_malformed_token_is_rejected(self, token_service):
        with pytest.raises(UnauthorizedException):
            token_service.verify("not.a.token")

    def test_token_without_numeric_subject_is_rejected(self, token_service):
        token = jwt.encode(
            {"sub": "abc", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "test-secret-key",
            algorithm="HS256",
        )
        with pytest.raises(UnauthorizedException):
            token_service.verify(token)


class TestPasswordHashing:

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = get_password_hash("secret123", rounds=4)
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("secret123", rounds=4) != get_password_hash("secret123", rounds=4)

    def test_garbage_hash_does_not_verify(self):
        assert not verify_password("secret123", "not-a-bcrypt-hash")
