"""
Loguru logging configuration.

Features:
- Structured JSON logging for production
- Console logging for development
- Optional rotating file sink
- Current correlation vector in all log messages
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger

from correlation_vector.core.correlation import get_current_vector
from correlation_vector.models.config import Settings, get_settings

if TYPE_CHECKING:
    from loguru import Record

PACKAGE_NAME = "correlation_vector"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[correlation_vector]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def correlation_filter(record: "Record") -> bool:
    """
    Add the current correlation vector to a log record.

    Args:
        record: Loguru log record.

    Returns:
        Always True (filter never drops messages).
    """
    record["extra"]["correlation_vector"] = get_current_vector() or "-"
    return True


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure Loguru for the application and enable this package's logs.

    Args:
        settings: Settings providing environment, level and file sink.
    """
    settings = settings or get_settings()
    development = settings.ENVIRONMENT == "development"
    level = settings.get_log_level()

    # Remove default handler
    logger.remove()
    logger.enable(PACKAGE_NAME)

    if development:
        # Human-readable format for development
        logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=level,
            filter=correlation_filter,
            colorize=True,
        )
    else:
        # JSON format for production (machine-parseable)
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            filter=correlation_filter,
            serialize=True,
        )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=LOG_FORMAT if development else "{message}",
            level=level,
            filter=correlation_filter,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            serialize=not development,
        )
