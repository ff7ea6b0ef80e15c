"""Test fixtures for the RFQ comparison service tests."""

from .quote_data import bare_quote_pair, detailed_quotes, make_item, make_quote

__all__ = [
    "bare_quote_pair",
    "detailed_quotes",
    "make_item",
    "make_quote",
]
