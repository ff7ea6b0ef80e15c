"""Shared utility modules."""

from .logger import configure_logging, get_logger
from .timezone import ensure_utc, now_utc

__all__ = [
    "configure_logging",
    "get_logger",
    "ensure_utc",
    "now_utc",
]
