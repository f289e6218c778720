"""
Pydantic schemas for API request/response validation.
"""

from movie_api.schemas.common import ErrorResponse, SuccessResponse, HealthResponse
from movie_api.schemas.auth import UserLogin, TokenResponse
from movie_api.schemas.user import UserCreate, UserUpdate, UserResponse
from movie_api.schemas.movie import GenreResponse, DirectorResponse, MovieResponse

__all__ = [
    # Common
    "ErrorResponse",
    "SuccessResponse",
    "HealthResponse",
    # Auth
    "UserLogin",
    "TokenResponse",
    # Users
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Movies
    "GenreResponse",
    "DirectorResponse",
    "MovieResponse",
]
