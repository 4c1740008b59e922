"""Domain exceptions for the users service.

Presentation layer maps them to HTTP responses in exception handlers
(see users_service.core.exception_handlers). Storage failures are not
wrapped here: they propagate as driver/SQLAlchemy errors and are handled
by the generic handler.
"""

from typing import Any


class UsersServiceException(Exception):
    """Base exception for all users service errors.

    Attributes:
        message: Human-readable error description (returned to clients).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: ``{"error": message}``."""
        return {"error": self.message}


class ValidationException(UsersServiceException):
    """Raised when required input is missing (e.g. email on create)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class NotFoundException(UsersServiceException):
    """Raised by the HTTP layer when a lookup returned no record."""

    def __init__(
        self, resource_type: str | None = None, resource_id: str | None = None
    ) -> None:
        details: dict[str, Any] = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__("Not found", "RESOURCE_NOT_FOUND", details)
