"""
Authentication schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from movie_api.schemas.user import UserResponse


class UserLogin(BaseModel):
    """User login request."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Authentication token response."""

    user: UserResponse
    token: str
    token_type: str = "bearer"
    expires_at: datetime
