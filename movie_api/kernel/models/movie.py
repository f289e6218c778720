"""
Movie catalog model.

Genre and director are stored as embedded JSON sub-documents, the shape
clients receive them in.
"""

import uuid
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from movie_api.kernel.models.base import Base, TimestampMixin, generate_uuid


class Movie(Base, TimestampMixin):
    """Catalog entry."""

    __tablename__ = "movies"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=generate_uuid,
    )
    title: Mapped[str] = mapped_column(
        String(500),
        unique=True,
        index=True,
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    # {"name": ..., "description": ...}
    genre: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
    )
    # {"name": ..., "bio": ..., "birth_year": ..., "death_year": ...}
    director: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
    )
    image_path: Mapped[Optional[str]] = mapped_column(
        String(1024),
        nullable=True,
    )
    featured: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Movie {self.title}>"
