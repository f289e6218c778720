"""
Catalog service: read access to movies plus the insert path used for seeding.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.kernel.errors import MovieNotFound
from movie_api.kernel.models.movie import Movie


class CatalogService:
    """Lookups over the movies collection."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_movies(self) -> List[Movie]:
        result = await self.session.execute(select(Movie).order_by(Movie.title))
        return list(result.scalars().all())

    async def count_movies(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Movie))
        return result.scalar_one()

    async def get_movie_by_title(self, title: str) -> Movie:
        """Get a movie by exact title or raise MovieNotFound."""
        result = await self.session.execute(select(Movie).where(Movie.title == title))
        movie = result.scalar_one_or_none()
        if movie is None:
            raise MovieNotFound()
        return movie

    async def get_genre(self, name: str) -> Dict[str, Any]:
        """Genre sub-document of the first movie in that genre."""
        movie = await self._first_where(Movie.genre["name"].as_string() == name)
        if movie is None:
            raise MovieNotFound("Genre not found")
        return movie.genre

    async def get_director(self, name: str) -> Dict[str, Any]:
        """Director sub-document of the first movie by that director."""
        movie = await self._first_where(Movie.director["name"].as_string() == name)
        if movie is None:
            raise MovieNotFound("Director not found")
        return movie.director

    async def create_movie(
        self,
        title: str,
        genre: Dict[str, Any],
        director: Dict[str, Any],
        description: Optional[str] = None,
        image_path: Optional[str] = None,
        featured: bool = False,
    ) -> Movie:
        movie = Movie(
            title=title,
            description=description,
            genre=genre,
            director=director,
            image_path=image_path,
            featured=featured,
        )
        self.session.add(movie)
        await self.session.flush()
        return movie

    async def _first_where(self, criterion) -> Optional[Movie]:
        result = await self.session.execute(
            select(Movie).where(criterion).order_by(Movie.created_at, Movie.title).limit(1)
        )
        return result.scalar_one_or_none()
