"""Domain layer: exceptions. No dependencies on infrastructure or presentation."""

from users_service.domain.exceptions import (
    NotFoundException,
    UsersServiceException,
    ValidationException,
)

__all__ = [
    "NotFoundException",
    "UsersServiceException",
    "ValidationException",
]
