"""
FastAPI dependencies for authentication, ownership checks and database sessions.
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.database import async_session_maker
from movie_api.kernel.errors import PermissionDenied
from movie_api.kernel.identity.identity_service import IdentityService
from movie_api.kernel.identity.jwt import JWTManager, get_jwt_manager
from movie_api.kernel.models.user import User


# Missing or non-Bearer Authorization headers come through as None
security = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session: commit on success, rollback on error."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


DbSession = Annotated[AsyncSession, Depends(get_db)]
JWT = Annotated[JWTManager, Depends(get_jwt_manager)]


def get_identity_service(db: DbSession, jwt_manager: JWT) -> IdentityService:
    return IdentityService(db, jwt_manager)


Identities = Annotated[IdentityService, Depends(get_identity_service)]


async def get_current_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    identities: Identities,
) -> User:
    """Resolve the bearer token to a stored user or raise Unauthenticated (401)."""
    token = credentials.credentials if credentials else None
    user = await identities.resolve_token(token)
    request.state.username = user.username
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def require_owner(username: str, user: CurrentUser) -> str:
    """
    Allow username-scoped mutations only on the caller's own account.

    Runs after the guard, so an unauthenticated caller still gets 401.
    """
    if user.username != username:
        raise PermissionDenied()
    return username


OwnedUsername = Annotated[str, Depends(require_owner)]
