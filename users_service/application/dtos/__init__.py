"""Application DTOs (data transfer objects between layers)."""

from users_service.application.dtos.user import UserCreate, UserRecord

__all__ = ["UserCreate", "UserRecord"]
