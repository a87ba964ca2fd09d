"""Structured logger for observability."""

import logging
from typing import Any

from app.infrastructure.config.settings import settings

_logger = logging.getLogger("outbound_call_manager")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    event: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'use_case', 'persistence')
        event: Event name (e.g., 'customer_created')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component, "event": event}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_http_request(method: str, path: str, **kwargs: Any) -> None:
    """
    Log an inbound HTTP request.

    Args:
        method: HTTP method
        path: Request path
        **kwargs: Additional fields (e.g., status_code)
    """
    log_event("http", "request", method=method, path=path, **kwargs)


logger = _logger
