"""
User endpoints: registration, profiles and favorites.
"""

import uuid
from typing import List

from fastapi import APIRouter, status

from movie_api.api.deps import CurrentUser, Identities, OwnedUsername
from movie_api.schemas.common import SuccessResponse
from movie_api.schemas.user import UserCreate, UserResponse, UserUpdate

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(user: CurrentUser, identities: Identities):
    """List all users."""
    users = await identities.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{username}", response_model=UserResponse)
async def get_user(username: str, user: CurrentUser, identities: Identities):
    """Get a user by username."""
    found = await identities.get_user(username)
    return UserResponse.model_validate(found)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, identities: Identities):
    """
    Register a new user account.

    Open to unauthenticated callers. Returns 400 if the username is taken.
    """
    user = await identities.register_user(
        username=data.username,
        password=data.password,
        email=data.email,
        birthday=data.birthday,
    )
    return UserResponse.model_validate(user)


@router.put("/{username}", response_model=UserResponse)
async def update_user(username: OwnedUsername, data: UserUpdate, identities: Identities):
    """Update the caller's own profile."""
    updated = await identities.update_user(username, data.model_dump(exclude_unset=True))
    return UserResponse.model_validate(updated)


@router.delete("/{username}", response_model=SuccessResponse)
async def delete_user(username: OwnedUsername, identities: Identities):
    """Delete the caller's own account."""
    await identities.delete_user(username)
    return SuccessResponse(message=f"{username} was deleted")


@router.post("/{username}/movies/{movie_id}", response_model=UserResponse)
async def add_favorite(username: OwnedUsername, movie_id: uuid.UUID, identities: Identities):
    """Add a movie to the caller's favorites."""
    updated = await identities.add_favorite(username, movie_id)
    return UserResponse.model_validate(updated)


@router.delete("/{username}/movies/{movie_id}", response_model=UserResponse)
async def remove_favorite(username: OwnedUsername, movie_id: uuid.UUID, identities: Identities):
    """Remove a movie from the caller's favorites."""
    updated = await identities.remove_favorite(username, movie_id)
    return UserResponse.model_validate(updated)
