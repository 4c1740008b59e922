"""Run the HTTP service: ``python -m users_service``.

Host and port come from settings (HOST / PORT environment variables or .env).
"""

import uvicorn

from users_service.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "users_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
