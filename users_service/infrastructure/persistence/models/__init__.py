"""Persistence models: ORM entities."""

from users_service.infrastructure.persistence.models.user import User

__all__ = ["User"]
