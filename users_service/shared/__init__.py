"""Shared utilities: request context, telemetry and cross-cutting helpers. No business logic."""

from users_service.shared.context import get_request_id, reset_request_id, set_request_id

__all__ = ["get_request_id", "reset_request_id", "set_request_id"]
