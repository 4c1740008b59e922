"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserCreate:
    """Attributes for a new user. id and created_at come from storage."""

    email: str


@dataclass(frozen=True)
class UserRecord:
    """Persisted user (result of find_by_id, all, create)."""

    id: str
    email: str
    created_at: datetime
