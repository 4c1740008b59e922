"""Shared utilities: datetime normalization."""

from users_service.shared.utils.datetime import ensure_utc

__all__ = ["ensure_utc"]
