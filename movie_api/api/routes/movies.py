"""
Movie catalog endpoints (read-only).
"""

from typing import List

from fastapi import APIRouter

from movie_api.api.deps import CurrentUser, DbSession
from movie_api.kernel.catalog.catalog_service import CatalogService
from movie_api.schemas.movie import DirectorResponse, GenreResponse, MovieResponse

router = APIRouter()


@router.get("", response_model=List[MovieResponse])
async def list_movies(user: CurrentUser, db: DbSession):
    """List all movies."""
    movies = await CatalogService(db).list_movies()
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/genre/{name}", response_model=GenreResponse)
async def get_genre(name: str, user: CurrentUser, db: DbSession):
    """Get a genre by name."""
    return await CatalogService(db).get_genre(name)


@router.get("/director/{name}", response_model=DirectorResponse)
async def get_director(name: str, user: CurrentUser, db: DbSession):
    """Get a director by name."""
    return await CatalogService(db).get_director(name)


@router.get("/{title}", response_model=MovieResponse)
async def get_movie(title: str, user: CurrentUser, db: DbSession):
    """Get a single movie by title."""
    movie = await CatalogService(db).get_movie_by_title(title)
    return MovieResponse.model_validate(movie)
