"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from users_service.application.dtos.user import UserRecord


class UserCreateRequest(BaseModel):
    """Request body for creating a user.

    email is optional at the schema level so that a missing or empty value
    is reported as "Missing email" by the route rather than as a schema error.
    """

    email: str | None = None


class UserResponse(BaseModel):
    """User as returned by the API (created_at serialized as createdAt)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(id=record.id, email=record.email, created_at=record.created_at)


class UserEnvelope(BaseModel):
    """Response for GET /users/{user_id}."""

    user: UserResponse


class UserListResponse(BaseModel):
    """Response for GET /users (newest first)."""

    users: list[UserResponse]
