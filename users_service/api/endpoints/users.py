"""User API: thin routes delegating to UserService."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from users_service.api.dependencies import get_user_service
from users_service.application.dtos.user import UserCreate
from users_service.application.services import UserService
from users_service.domain.exceptions import NotFoundException, ValidationException
from users_service.schemas.user import (
    UserCreateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)

router = APIRouter()


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserEnvelope:
    """Get user by id; 404 when absent (or when the lookup failed)."""
    user = await user_service.find_by_id(user_id)
    if user is None:
        raise NotFoundException("user", user_id)
    return UserEnvelope(user=UserResponse.from_record(user))


@router.get("", response_model=UserListResponse)
async def list_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserListResponse:
    """List all users, newest first."""
    users = await user_service.all()
    return UserListResponse(users=[UserResponse.from_record(u) for u in users])


@router.post("", response_model=UserResponse)
async def create_user(
    user_service: Annotated[UserService, Depends(get_user_service)],
    body: Annotated[UserCreateRequest | None, Body()] = None,
) -> UserResponse:
    """Create a user. 422 when email is missing or empty; storage errors surface as 500."""
    email = body.email if body is not None else None
    if not email:
        raise ValidationException("Missing email", field="email")
    user = await user_service.create(UserCreate(email=email))
    return UserResponse.from_record(user)
