"""Presentation-layer dependency injection (composition root).

The query executor is created once by the lifespan and stored on
app.state; a UserService is built per request around it. Tests override
get_query_executor or get_user_service via app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from users_service.application.interfaces import IQueryExecutor
from users_service.application.services import UserService


def get_query_executor(request: Request) -> IQueryExecutor:
    """Return the shared query executor set up at startup."""
    return request.app.state.executor


def get_user_service(
    executor: Annotated[IQueryExecutor, Depends(get_query_executor)],
) -> UserService:
    """Build UserService for this request around the shared executor."""
    return UserService(executor)
