"""Shared telemetry: logging setup."""

from users_service.shared.telemetry.logging import RequestIdFilter, get_logger, setup_logging

__all__ = [
    "RequestIdFilter",
    "setup_logging",
    "get_logger",
]
