"""
Logging Package
Structured logging with sensitive data redaction
"""
from renderlayout.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR

ROOT_LOGGER = 'renderlayout'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the renderlayout hierarchy

    Module names outside the package are nested below 'renderlayout', so a
    single LoggerConfig.setup_logger('renderlayout') call covers every
    render trace.

    Example:
        from renderlayout.logging import getLogger
        logger = getLogger(__name__)
    """
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
