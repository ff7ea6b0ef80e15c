"""CLI interface module."""

from .score_quotes import score_quotes

__all__ = ["score_quotes"]
