"""
Identity Core - Authentication and user management.
"""

from movie_api.kernel.identity.password import PasswordHasher, verify_password, hash_password
from movie_api.kernel.identity.jwt import (
    JWTManager,
    AccessTokenPayload,
    get_jwt_manager,
)
from movie_api.kernel.identity.identity_service import IdentityService

__all__ = [
    "PasswordHasher",
    "verify_password",
    "hash_password",
    "JWTManager",
    "AccessTokenPayload",
    "get_jwt_manager",
    "IdentityService",
]
