"""User application service: lookup by id, listing and creation.

Owns every query against the users table. The executor (shared pool) is
injected and never closed here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import insert, select

from users_service.application.dtos.user import UserCreate, UserRecord
from users_service.application.interfaces.executor import IQueryExecutor
from users_service.infrastructure.persistence.models.user import User
from users_service.shared.telemetry import get_logger
from users_service.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

_COLUMNS = (User.id, User.email, User.created_at.label("createdAt"))


def _row_to_record(row: Mapping[str, Any]) -> UserRecord:
    """Map a users row (created_at aliased to createdAt) to UserRecord."""
    return UserRecord(
        id=str(row["id"]),
        email=row["email"],
        created_at=ensure_utc(row["createdAt"]),
    )


class UserService:
    """Find, list and create users through the injected query executor."""

    def __init__(self, db: IQueryExecutor) -> None:
        self.db = db

    async def find_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user with this id, or None.

        Any storage error (malformed id, lost connection) is logged and
        reported as None, so callers cannot tell a failed lookup from a
        missing user.
        """
        stmt = select(*_COLUMNS).where(User.id == user_id)
        try:
            row = await self.db.maybe_one(stmt)
        except Exception:
            logger.warning(
                "User lookup failed for id=%r; treating as not found",
                user_id,
                exc_info=True,
            )
            return None
        return _row_to_record(row) if row is not None else None

    async def all(self) -> list[UserRecord]:
        """Return every user, most recently created first."""
        stmt = select(*_COLUMNS).order_by(User.created_at.desc())
        rows = await self.db.any(stmt)
        return [_row_to_record(row) for row in rows]

    async def create(self, attrs: UserCreate) -> UserRecord:
        """Insert a user and return the stored row (generated id and created_at)."""
        stmt = insert(User).values(email=attrs.email).returning(*_COLUMNS)
        row = await self.db.one(stmt)
        logger.info("Created user id=%s", row["id"])
        return _row_to_record(row)
