"""
Identity service: registration, credential checks, token resolution and
profile/favorites management.
"""

import uuid
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from movie_api.kernel.errors import (
    InvalidCredentials,
    MovieNotFound,
    Unauthenticated,
    UserNotFound,
    UsernameTaken,
)
from movie_api.kernel.identity.jwt import JWTManager
from movie_api.kernel.identity.password import burn_verification, hash_password, verify_password
from movie_api.kernel.models.movie import Movie
from movie_api.kernel.models.user import FavoriteMovie, User
from movie_api.logging_config import get_logger

logger = get_logger(__name__)

_UPDATABLE_FIELDS = ("username", "password", "email", "birthday")


class IdentityService:
    """
    Service for user identity operations.

    Handles registration, authentication, bearer token resolution and the
    username-scoped mutations (profile, favorites, deletion).
    """

    def __init__(self, session: AsyncSession, jwt_manager: Optional[JWTManager] = None):
        self.session = session
        self.jwt_manager = jwt_manager

    async def register_user(
        self,
        username: str,
        password: str,
        email: str,
        birthday: Optional[date] = None,
    ) -> User:
        """
        Register a new user.

        Args:
            username: Unique, case-sensitive username
            password: Plain text password (only its hash is stored)
            email: Contact address
            birthday: Optional date of birth

        Returns:
            The created User object

        Raises:
            UsernameTaken: If the username already exists
        """
        if await self.get_user_by_username(username):
            raise UsernameTaken(username)

        user = User(
            username=username,
            password_hash=await run_in_threadpool(hash_password, password),
            email=email,
            birthday=birthday,
        )
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            # Lost a race with a concurrent registration
            raise UsernameTaken(username)

        logger.info("User registered", extra={"username": username})
        return await self._reload(user.id)

    async def authenticate(self, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Unknown usernames and wrong passwords fail identically.

        Raises:
            InvalidCredentials: If the pair does not match a stored identity
        """
        user = await self.get_user_by_username(username)
        if user is None:
            await run_in_threadpool(burn_verification, password)
            logger.warning("Login failed", extra={"username": username})
            raise InvalidCredentials()

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            logger.warning("Login failed", extra={"username": username})
            raise InvalidCredentials()

        return user

    async def login(self, username: str, password: str) -> tuple[User, str, datetime]:
        """
        Authenticate and mint an access token.

        Returns:
            Tuple of (User, token, expiration_datetime)
        """
        user = await self.authenticate(username, password)
        token, expires_at = self._require_jwt_manager().create_access_token(user.username)
        logger.info("Login succeeded", extra={"username": user.username})
        return user, token, expires_at

    async def resolve_token(self, token: Optional[str]) -> User:
        """
        Resolve a bearer token to the stored user it names.

        The token's subject is only a lookup key: the user is fetched again
        so deleted or renamed accounts stop authenticating.

        Raises:
            Unauthenticated: Missing, invalid or expired token, or unknown subject
        """
        if not token:
            raise Unauthenticated()

        payload = self._require_jwt_manager().verify_access_token(token)
        if payload is None:
            raise Unauthenticated("Invalid or expired token")

        user = await self.get_user_by_username(payload.sub)
        if user is None:
            raise Unauthenticated("User no longer exists")

        return user

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by exact username."""
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_user(self, username: str) -> User:
        """Get a user by username or raise UserNotFound."""
        user = await self.get_user_by_username(username)
        if user is None:
            raise UserNotFound()
        return user

    async def list_users(self) -> List[User]:
        result = await self.session.execute(select(User).order_by(User.created_at, User.username))
        return list(result.scalars().all())

    async def update_user(self, username: str, changes: Dict[str, Any]) -> User:
        """
        Update profile fields of an existing user.

        Args:
            username: Current username
            changes: Subset of username, password, email, birthday. A new
                password is hashed before it is stored.

        Raises:
            UserNotFound: If no such user
            UsernameTaken: If renaming onto an existing username
        """
        user = await self.get_user(username)

        unknown = set(changes) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        new_username = changes.get("username")
        if new_username is not None and new_username != user.username:
            if await self.get_user_by_username(new_username):
                raise UsernameTaken(new_username)
            user.username = new_username

        if changes.get("password") is not None:
            user.password_hash = await run_in_threadpool(hash_password, changes["password"])

        if changes.get("email") is not None:
            user.email = changes["email"]

        if "birthday" in changes:
            user.birthday = changes["birthday"]

        try:
            await self.session.flush()
        except IntegrityError:
            raise UsernameTaken(new_username or username)

        logger.info(
            "User updated",
            extra={"username": user.username, "fields": sorted(changes)},
        )
        return await self._reload(user.id)

    async def delete_user(self, username: str) -> None:
        """
        Delete a user and their favorites.

        Raises:
            UserNotFound: If no such user
        """
        user = await self.get_user(username)
        await self.session.delete(user)
        await self.session.flush()
        logger.info("User deleted", extra={"username": username})

    async def add_favorite(self, username: str, movie_id: uuid.UUID) -> User:
        """
        Add a movie to the user's favorites. Adding it again is a no-op.

        Raises:
            UserNotFound: If no such user
            MovieNotFound: If no such movie
        """
        user = await self.get_user(username)
        if await self.session.get(Movie, movie_id) is None:
            raise MovieNotFound()

        stmt = self._insert(FavoriteMovie).values(
            user_id=user.id,
            movie_id=movie_id,
        ).on_conflict_do_nothing(index_elements=["user_id", "movie_id"])
        await self.session.execute(stmt)

        return await self._reload(user.id)

    async def remove_favorite(self, username: str, movie_id: uuid.UUID) -> User:
        """
        Remove a movie from the user's favorites. Removing an absent one is a no-op.

        Raises:
            UserNotFound: If no such user
        """
        user = await self.get_user(username)
        await self.session.execute(
            delete(FavoriteMovie).where(
                FavoriteMovie.user_id == user.id,
                FavoriteMovie.movie_id == movie_id,
            )
        )
        return await self._reload(user.id)

    def _insert(self, table):
        """Dialect-specific INSERT supporting ON CONFLICT DO NOTHING."""
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(table)
        if dialect == "sqlite":
            return sqlite.insert(table)
        raise NotImplementedError(f"Unsupported database dialect: {dialect}")

    async def _reload(self, user_id: uuid.UUID) -> User:
        """Re-read a user (columns and favorites) after a write."""
        result = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    def _require_jwt_manager(self) -> JWTManager:
        if self.jwt_manager is None:
            raise RuntimeError("IdentityService was created without a JWTManager")
        return self.jwt_manager
