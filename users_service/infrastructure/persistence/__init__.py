"""Persistence: engine factory, ORM models and the query executor."""

from users_service.infrastructure.persistence.database import Base, create_engine
from users_service.infrastructure.persistence.executor import SqlAlchemyQueryExecutor

__all__ = ["Base", "SqlAlchemyQueryExecutor", "create_engine"]
