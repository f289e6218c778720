"""
Pytest fixtures for movie API tests.

Every test runs against a fresh temp-file SQLite database (in-memory SQLite
is per-connection, and the app opens its own connections).
"""

import os
import tempfile
from typing import AsyncGenerator

# Configure before anything imports movie_api.database (engine is built at import)
_tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
_tmp.close()
TEST_DB_PATH = _tmp.name
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.config import get_settings

get_settings.cache_clear()

from movie_api.database import async_session_maker, engine
from movie_api.kernel.catalog.catalog_service import CatalogService
from movie_api.kernel.identity.identity_service import IdentityService
from movie_api.kernel.identity.jwt import JWTManager, get_jwt_manager
from movie_api.kernel.models import Base, Movie, User
from movie_api.main import app

get_jwt_manager.cache_clear()

TEST_PASSWORD = "longpass1"


def pytest_sessionfinish(session, exitstatus):
    """Clean up temp DB file after test run."""
    for suffix in ("", "-wal", "-shm"):
        path = TEST_DB_PATH + suffix
        if os.path.exists(path):
            os.unlink(path)


@pytest_asyncio.fixture
async def db_engine():
    """Recreate all tables for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """A session on the test database."""
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def jwt_manager() -> JWTManager:
    """The same JWT manager the app uses."""
    return get_jwt_manager()


@pytest.fixture
def identities(db_session: AsyncSession, jwt_manager: JWTManager) -> IdentityService:
    return IdentityService(db_session, jwt_manager)


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, identities: IdentityService) -> User:
    """A committed user 'alice01' with password TEST_PASSWORD."""
    user = await identities.register_user(
        username="alice01",
        password=TEST_PASSWORD,
        email="a@example.com",
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession, identities: IdentityService) -> User:
    user = await identities.register_user(
        username="bobby02",
        password="otherpass2",
        email="b@example.com",
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def movies(db_session: AsyncSession) -> dict[str, Movie]:
    """Two committed catalog entries keyed by title."""
    catalog = CatalogService(db_session)
    stalker = await catalog.create_movie(
        title="Stalker",
        description="A guide leads two men through the Zone.",
        genre={"name": "Science Fiction", "description": "Imagined science and technology."},
        director={
            "name": "Andrei Tarkovsky",
            "bio": "Soviet filmmaker.",
            "birth_year": 1932,
            "death_year": 1986,
        },
        image_path="stalker.png",
        featured=True,
    )
    vertigo = await catalog.create_movie(
        title="Vertigo",
        genre={"name": "Thriller", "description": "Suspense-driven stories."},
        director={"name": "Alfred Hitchcock", "bio": "Master of Suspense.", "birth_year": 1899},
    )
    await db_session.commit()
    return {"Stalker": stalker, "Vertigo": vertigo}


@pytest.fixture
def auth_headers(test_user: User, jwt_manager: JWTManager) -> dict:
    """Authorization header for test_user."""
    token, _ = jwt_manager.create_access_token(test_user.username)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def client(db_engine) -> AsyncGenerator[AsyncClient, None]:
    """Async client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
