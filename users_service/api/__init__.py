"""HTTP API: routers, endpoints and dependencies."""

from users_service.api.router import api_router

__all__ = ["api_router"]
