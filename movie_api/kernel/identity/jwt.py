"""
JWT token management for authentication.

Tokens are stateless HS256 JWTs carrying only the username (``sub``) and
the issue/expiry timestamps. Nothing is stored server-side; a token stays
valid until it expires.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel

from movie_api.config import Settings, get_settings


class AccessTokenPayload(BaseModel):
    """Decoded JWT access token claims."""

    sub: str  # Username
    exp: datetime
    iat: datetime


class JWTManager:
    """
    JWT token creation and verification.

    The signing secret is fixed at construction and never changes for the
    lifetime of the instance.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_days: int = 7,
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expire_days = access_token_expire_days

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTManager":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            access_token_expire_days=settings.access_token_expire_days,
        )

    def create_access_token(
        self,
        username: str,
        expires_delta: Optional[timedelta] = None,
    ) -> tuple[str, datetime]:
        """
        Create a new access token.

        Args:
            username: Subject of the token
            expires_delta: Optional custom lifetime (defaults to the configured days)

        Returns:
            Tuple of (token, expiration_datetime)
        """
        now = datetime.now(timezone.utc).replace(microsecond=0)
        expire = now + (expires_delta or timedelta(days=self.access_token_expire_days))

        payload = {
            "sub": username,
            "iat": now,
            "exp": expire,
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        return token, expire

    def verify_access_token(self, token: str) -> Optional[AccessTokenPayload]:
        """
        Verify and decode an access token.

        Checks the signature and the expiry. Returns None for anything that
        is not a currently valid token signed with our secret.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError:
            return None

        subject = payload.get("sub")
        if not subject:
            return None

        return AccessTokenPayload(
            sub=subject,
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            iat=datetime.fromtimestamp(payload.get("iat", payload["exp"]), tz=timezone.utc),
        )


@lru_cache
def get_jwt_manager() -> JWTManager:
    """Process-wide JWT manager built from settings."""
    return JWTManager.from_settings(get_settings())
