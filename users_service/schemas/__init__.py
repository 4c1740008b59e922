"""API request/response schemas (Pydantic)."""

from users_service.schemas.user import (
    UserCreateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "UserCreateRequest",
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
]
