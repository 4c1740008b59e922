"""HTTP middleware. Applied in users_service.main."""

from users_service.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
