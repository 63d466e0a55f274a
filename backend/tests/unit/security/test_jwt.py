"""
Unit tests for JWT token utilities.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from jose import jwt

from feedmesh.config import Settings
from feedmesh.core.exceptions import InvalidToken
from feedmesh.security import Identity
from feedmesh.security.jwt import create_access_token, verify_access_token


class TestJWTUtils:
    """Test token issue and verification."""

    @pytest.fixture
    def mock_settings(self):
        return Settings(secret_key="test-secret-key", algorithm="HS256", access_token_expire_minutes=30)

    @pytest.fixture(autouse=True)
    def _patch_settings(self, mock_settings):
        with patch("feedmesh.security.jwt.get_settings", return_value=mock_settings):
            yield

    def test_round_trip(self):
        token = create_access_token(42)
        assert verify_access_token(token) == Identity(user_id=42)

    def test_payload_shape(self, mock_settings):
        token = create_access_token(7)
        payload = jwt.decode(token, mock_settings.secret_key, algorithms=[mock_settings.algorithm])

        assert payload["sub"] == "7"
        assert payload["type"] == "access"
        assert payload["exp"] - payload["iat"] == 30 * 60

    def test_default_lifetime_is_seven_days(self):
        assert Settings().access_token_expire_minutes == 7 * 24 * 60

    def test_custom_expiry(self, mock_settings):
        token = create_access_token(7, expires_delta=timedelta(minutes=5))
        payload = jwt.decode(token, mock_settings.secret_key, algorithms=[mock_settings.algorithm])
        assert payload["exp"] - payload["iat"] == 5 * 60

    def test_expired_token_rejected(self):
        token = create_access_token(1, expires_delta=timedelta(seconds=-10))
        with pytest.raises(InvalidToken):
            verify_access_token(token)

    def test_tampered_token_rejected(self):
        token = create_access_token(1)
        head, body, sig = token.split(".")
        tampered = ".".join([head, body, sig[:-2] + ("AA" if sig[-2:] != "AA" else "BB")])
        with pytest.raises(InvalidToken):
            verify_access_token(tampered)

    def test_wrong_secret_rejected(self):
        token = jwt.encode(
            {"sub": "1", "type": "access", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            "another-secret",
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            verify_access_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidToken):
            verify_access_token("not-a-token")

    @pytest.mark.parametrize("sub", ["abc", "0", "-5", None])
    def test_bad_subject_rejected(self, mock_settings, sub):
        claims = {"type": "access", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)}
        if sub is not None:
            claims["sub"] = sub
        token = jwt.encode(claims, mock_settings.secret_key, algorithm="HS256")
        with pytest.raises(InvalidToken):
            verify_access_token(token)

    def test_non_access_type_rejected(self, mock_settings):
        token = jwt.encode(
            {"sub": "1", "type": "refresh", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            mock_settings.secret_key,
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            verify_access_token(token)
