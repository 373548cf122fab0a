"""
Logging Package
Structured logging with credential redaction
"""
from zancommon.logging.logger_config import (
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
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module loggers inside the bundle are children of the 'zancommon' logger,
    so configuring that one with LoggerConfig.setup_logger() covers all of them.

    Example:
        from zancommon.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Decoded query parameters", extra={'names': ['a', 'b']})
    """
    return logging.getLogger(name)
