"""Persistence: async engine factory and Base for SQLAlchemy ORM.

The engine owns the connection pool shared by all requests. It is built
by the application lifespan (users_service.core.lifespan) and disposed at
shutdown; nothing here creates it at import time.

asyncpg decodes timestamptz columns into timezone-aware datetimes
natively, so no custom type parser is registered on the connection.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from users_service.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine (connection pool) from settings.

    Pool and driver overrides are passed through only when set, so the
    SQLAlchemy/asyncpg defaults apply otherwise.
    """
    pool_kwargs: dict[str, Any] = {}
    if settings.db_pool_size is not None:
        pool_kwargs["pool_size"] = settings.db_pool_size
    if settings.db_max_overflow is not None:
        pool_kwargs["max_overflow"] = settings.db_max_overflow
    if settings.db_pool_timeout is not None:
        pool_kwargs["pool_timeout"] = settings.db_pool_timeout
    connect_args: dict[str, Any] = {}
    if settings.db_command_timeout is not None:
        connect_args["command_timeout"] = settings.db_command_timeout
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        connect_args=connect_args,
        **pool_kwargs,
    )
    logger.debug("Created database engine for %s", engine.url.render_as_string(hide_password=True))
    return engine
