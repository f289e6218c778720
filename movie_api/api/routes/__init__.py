"""
API routes.
"""

from fastapi import APIRouter

from movie_api.api.routes import auth, users, movies

router = APIRouter()

router.include_router(auth.router, tags=["Authentication"])
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(movies.router, prefix="/movies", tags=["Movies"])
