"""
API v1 routers.

This module exports all router instances for the API endpoints.
"""

from rfq_comparison.interfaces.api.v1.routers import comparisons, health

__all__ = ["comparisons", "health"]
