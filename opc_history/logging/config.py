"""
Logger setup for the opc_history package.

The package never installs output handlers of its own: the ``opc_history``
logger gets a ``NullHandler`` and the level from ``OPC_HISTORY_LOG_LEVEL``,
and records propagate to whatever the host application configured.
Structured fields travel in the ``context`` extra, the same key the
application's formatter is expected to merge into its output.
"""

import logging
from typing import Any

from opc_history.config import settings

PACKAGE_LOGGER = "opc_history"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(
        isinstance(handler, logging.NullHandler)
        for handler in package_logger.handlers
    ):
        package_logger.addHandler(logging.NullHandler())
    package_logger.setLevel(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    )
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package logger.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        Logger instance
    """
    _configure_package_logger()
    return logging.getLogger(name)


def log_context(**fields: Any) -> dict[str, Any]:
    """
    Build the ``extra`` mapping for a log call.

    Fields set to None are left out.

    Example:
        logger.warning("rejected", extra=log_context(model="X", error_count=2))
    """
    return {
        "context": {
            key: value for key, value in fields.items() if value is not None
        }
    }
