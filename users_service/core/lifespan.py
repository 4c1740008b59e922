"""Application lifespan: startup and shutdown.

Owns the lifecycle of the shared database engine (connection pool): it is
created on startup, exposed to routes as app.state.executor, and disposed
on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from users_service.core.config import get_settings
from users_service.infrastructure.persistence import SqlAlchemyQueryExecutor, create_engine
from users_service.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, database engine. Shutdown: engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    engine = create_engine(settings)
    app.state.engine = engine
    app.state.executor = SqlAlchemyQueryExecutor(engine)
    logger.info("Database engine created")

    yield

    # ---- Shutdown ----
    await engine.dispose()
    app.state.engine = None
    app.state.executor = None
    logger.info("Database engine disposed")
