"""SQLAlchemy implementation of the query executor port.

Each call checks a connection out of the engine pool, runs one statement
in its own transaction (commit on success, rollback on error) and returns
row mappings. Statements are SQLAlchemy constructs, so values are always
sent as bound parameters.
"""

from collections.abc import Sequence

from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.expression import Executable


class SqlAlchemyQueryExecutor:
    """Query executor over a shared AsyncEngine. Does not own the engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def maybe_one(self, statement: Executable) -> RowMapping | None:
        """Return the single row, or None. Raises MultipleResultsFound on >1 row."""
        async with self.engine.begin() as conn:
            result = await conn.execute(statement)
            return result.mappings().one_or_none()

    async def any(self, statement: Executable) -> Sequence[RowMapping]:
        """Return zero or more rows in statement order."""
        async with self.engine.begin() as conn:
            result = await conn.execute(statement)
            return result.mappings().all()

    async def one(self, statement: Executable) -> RowMapping:
        """Return exactly one row. Raises NoResultFound / MultipleResultsFound otherwise."""
        async with self.engine.begin() as conn:
            result = await conn.execute(statement)
            return result.mappings().one()
