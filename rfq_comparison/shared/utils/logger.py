"""Custom logger configuration for the RFQ comparison service."""

import logging
import os
import sys

import structlog
from structlog.processors import (
    TimeStamper,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import BoundLogger


def configure_logging(log_level: str | None = None) -> None:
    """Configure structlog and stdlib logging once per process.

    Args:
        log_level: Log level name, defaults to the LOG_LEVEL environment variable
    """
    if structlog.is_configured():
        return

    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer()
            if sys.stderr.isatty()
            else structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )


def get_logger(name: str) -> BoundLogger:
    """Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog BoundLogger instance
    """
    configure_logging()
    return structlog.get_logger(name)
