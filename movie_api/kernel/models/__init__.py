"""
Kernel Data Models

SQLAlchemy models for the identity and catalog collections.
"""

from movie_api.kernel.models.base import Base, TimestampMixin, generate_uuid, utcnow
from movie_api.kernel.models.user import User, FavoriteMovie
from movie_api.kernel.models.movie import Movie

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "generate_uuid",
    "utcnow",
    # Identity
    "User",
    "FavoriteMovie",
    # Catalog
    "Movie",
]
