"""
Movie catalog schemas.
"""

import uuid
from typing import Optional

from pydantic import BaseModel


class GenreResponse(BaseModel):
    """Genre sub-document."""

    name: str
    description: Optional[str] = None


class DirectorResponse(BaseModel):
    """Director sub-document."""

    name: str
    bio: Optional[str] = None
    birth_year: Optional[int] = None
    death_year: Optional[int] = None


class MovieResponse(BaseModel):
    """Movie response."""

    id: uuid.UUID
    title: str
    description: Optional[str] = None
    genre: GenreResponse
    director: DirectorResponse
    image_path: Optional[str] = None
    featured: bool = False

    class Config:
        from_attributes = True
