"""Unit tests for JWT issuance and verification."""

import base64
import json
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from movie_api.config import Settings
from movie_api.kernel.identity.jwt import AccessTokenPayload, JWTManager

SECRET = "unit-test-secret"


def _b64url(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


@pytest.fixture
def manager() -> JWTManager:
    return JWTManager(secret_key=SECRET, algorithm="HS256", access_token_expire_days=7)


class TestTokenIssue:
    def test_round_trip(self, manager: JWTManager):
        token, expires_at = manager.create_access_token("alice01")

        payload = manager.verify_access_token(token)

        assert isinstance(payload, AccessTokenPayload)
        assert payload.sub == "alice01"
        assert payload.exp == expires_at

    def test_claims_are_subject_and_timestamps_only(self, manager: JWTManager):
        token, _ = manager.create_access_token("alice01")

        claims = jwt.get_unverified_claims(token)

        assert set(claims) == {"sub", "iat", "exp"}
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_custom_lifetime(self, manager: JWTManager):
        token, expires_at = manager.create_access_token("alice01", expires_delta=timedelta(hours=1))

        claims = jwt.get_unverified_claims(token)

        assert claims["exp"] - claims["iat"] == 3600
        assert expires_at - datetime.now(timezone.utc) <= timedelta(hours=1)

    def test_from_settings(self):
        settings = Settings(_env_file=None)
        manager = JWTManager.from_settings(settings)

        assert manager.secret_key == settings.secret_key
        assert manager.access_token_expire_days == 7

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTManager(secret_key="")


class TestTokenVerify:
    def test_accepts_token_minted_by_standard_encoder(self, manager: JWTManager):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "alice01", "iat": now, "exp": now + timedelta(days=1)},
            SECRET,
            algorithm="HS256",
        )

        payload = manager.verify_access_token(token)

        assert payload is not None
        assert payload.sub == "alice01"

    def test_rejects_tampered_signature(self, manager: JWTManager):
        token, _ = manager.create_access_token("alice01")
        header, body, signature = token.split(".")
        # Middle characters always carry signature bits
        flipped = "A" if signature[10] != "A" else "B"
        tampered = ".".join([header, body, signature[:10] + flipped + signature[11:]])

        assert manager.verify_access_token(tampered) is None

    def test_rejects_tampered_payload(self, manager: JWTManager):
        token, _ = manager.create_access_token("alice01")
        header, body, signature = token.split(".")
        claims = jwt.get_unverified_claims(token)
        claims["sub"] = "mallory"
        forged = ".".join([header, _b64url(claims), signature])

        assert manager.verify_access_token(forged) is None

    def test_rejects_other_secret(self, manager: JWTManager):
        other = JWTManager(secret_key="some-other-secret")
        token, _ = other.create_access_token("alice01")

        assert manager.verify_access_token(token) is None

    def test_rejects_expired_token(self, manager: JWTManager):
        token, _ = manager.create_access_token("alice01", expires_delta=timedelta(seconds=-5))

        assert manager.verify_access_token(token) is None

    def test_rejects_unsigned_token(self, manager: JWTManager):
        now = int(datetime.now(timezone.utc).timestamp())
        unsigned = ".".join([
            _b64url({"alg": "none", "typ": "JWT"}),
            _b64url({"sub": "alice01", "iat": now, "exp": now + 3600}),
            "",
        ])

        assert manager.verify_access_token(unsigned) is None

    def test_rejects_token_without_subject(self, manager: JWTManager):
        now = datetime.now(timezone.utc)
        token = jwt.encode({"iat": now, "exp": now + timedelta(days=1)}, SECRET, algorithm="HS256")

        assert manager.verify_access_token(token) is None

    def test_rejects_token_without_expiry(self, manager: JWTManager):
        token = jwt.encode({"sub": "alice01"}, SECRET, algorithm="HS256")

        assert manager.verify_access_token(token) is None

    @pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "Bearer x.y.z"])
    def test_rejects_garbage(self, manager: JWTManager, garbage):
        assert manager.verify_access_token(garbage) is None
