"""Query executor interface (port) for the application layer.

Each method runs one parameterized statement and returns row mappings
keyed by column label. No infrastructure imports at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class IQueryExecutor(Protocol):
    """Protocol for running statements against the shared pool (DIP)."""

    async def maybe_one(self, statement: Any) -> Mapping[str, Any] | None:
        """Return at most one row, or None when no row matches."""

    async def any(self, statement: Any) -> Sequence[Mapping[str, Any]]:
        """Return zero or more rows."""

    async def one(self, statement: Any) -> Mapping[str, Any]:
        """Return exactly one row; raise when zero or several rows come back."""
