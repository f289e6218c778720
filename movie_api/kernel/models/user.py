"""
User model for identity management.
"""

import uuid
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Date, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_api.kernel.models.base import Base, TimestampMixin, generate_uuid, utcnow


class User(Base, TimestampMixin):
    """Registered user account."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=generate_uuid,
    )
    username: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    birthday: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True,
    )

    favorites: Mapped[List["FavoriteMovie"]] = relationship(
        "FavoriteMovie",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="FavoriteMovie.created_at",
    )

    @property
    def favorite_movies(self) -> List[uuid.UUID]:
        """Favorite movie ids in the order they were added."""
        return [favorite.movie_id for favorite in self.favorites]

    def __repr__(self) -> str:
        return f"<User {self.username}>"


class FavoriteMovie(Base):
    """A movie in a user's favorites. The composite key makes it a set."""

    __tablename__ = "favorite_movies"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    movie_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # Client-side timestamp keeps sub-second insertion order on SQLite
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    user: Mapped["User"] = relationship("User", back_populates="favorites")
