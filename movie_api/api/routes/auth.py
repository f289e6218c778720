"""
Authentication endpoints.
"""

from fastapi import APIRouter

from movie_api.api.deps import Identities
from movie_api.schemas.auth import UserLogin, TokenResponse
from movie_api.schemas.user import UserResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(data: UserLogin, identities: Identities):
    """
    Authenticate with username and password and return a bearer token.

    The token is valid for the configured number of days and cannot be
    revoked before it expires.
    """
    user, token, expires_at = await identities.login(data.username, data.password)

    return TokenResponse(
        user=UserResponse.model_validate(user),
        token=token,
        expires_at=expires_at,
    )
