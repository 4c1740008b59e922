"""Logging configuration for the application."""

import logging
import sys

from users_service.core.config import get_settings
from users_service.shared.context import get_request_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Attach the current request id (or "-") to every record as ``request_id``.

    Records that already carry one (passed via ``extra``) keep it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = get_request_id() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is settings.log_level when set, otherwise DEBUG when
    settings.debug is True and INFO when it is not. Output goes to stdout,
    each line tagged with the request id of the request that produced it.
    """
    settings = get_settings()
    if settings.log_level:
        log_level = logging.getLevelNamesMapping()[settings.log_level]
    else:
        log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
