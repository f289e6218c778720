"""
User schemas.
"""

import re
import uuid
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")

USERNAME_MIN_LENGTH = 5
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20


def _check_username(v: str) -> str:
    if not _ALPHANUMERIC.fullmatch(v):
        raise ValueError("Username contains non alphanumeric characters - not allowed.")
    return v


def _blank_to_none(v):
    # Empty birthday strings count as "not provided"
    if isinstance(v, str) and not v.strip():
        return None
    return v


class UserCreate(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=USERNAME_MIN_LENGTH, max_length=64)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    email: EmailStr
    birthday: Optional[date] = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return _check_username(v)

    @field_validator("birthday", mode="before")
    @classmethod
    def validate_birthday(cls, v):
        return _blank_to_none(v)


class UserUpdate(BaseModel):
    """Profile update request. Omitted fields are left unchanged."""

    username: Optional[str] = Field(None, min_length=USERNAME_MIN_LENGTH, max_length=64)
    password: Optional[str] = Field(
        None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    email: Optional[EmailStr] = None
    birthday: Optional[date] = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_username(v)

    @field_validator("birthday", mode="before")
    @classmethod
    def validate_birthday(cls, v):
        return _blank_to_none(v)


class UserResponse(BaseModel):
    """User profile response. The password hash is never included."""

    id: uuid.UUID
    username: str
    email: str
    birthday: Optional[date] = None
    favorite_movies: List[uuid.UUID] = []
    created_at: datetime

    class Config:
        from_attributes = True
