"""Application interfaces (ports).

The ports themselves import nothing from users_service.infrastructure;
services build their SQLAlchemy statements from the ORM models and hand
them to whichever executor implements the port.
"""

from users_service.application.interfaces.executor import IQueryExecutor

__all__ = ["IQueryExecutor"]
