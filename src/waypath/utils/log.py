"""Structured logging helpers for waypath.

Every module logs through :func:`get_logger`, which returns a structlog
logger bound to the emitting component:

    from waypath.utils.log import get_logger

    logger = get_logger("creation")
    logger.info("creation.renamed", path=str(path), attempts=3)

The library never configures structlog on import. Applications that want
waypath's defaults call :func:`configure_logging` once at startup; debug
events are dropped unless ``debug`` is true (see ``WAYPATH_DEBUG``).
"""

import logging
from typing import Any

import structlog

from waypath.core.config import get_settings


def get_logger(component: str, **initial_values: Any) -> Any:
    """Return a structlog logger bound with ``component`` and extra fields."""
    return structlog.get_logger(component=component, **initial_values)


def configure_logging(debug: bool | None = None) -> None:
    """Install waypath's structlog configuration.

    Args:
        debug: Emit DEBUG events; otherwise INFO and above. Defaults to the
            ``WAYPATH_DEBUG`` setting
    """
    if debug is None:
        debug = get_settings().debug
    level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
