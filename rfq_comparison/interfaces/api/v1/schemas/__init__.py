"""
Pydantic schemas for API v1.

This module exports all request and response models for the API endpoints.
"""

from rfq_comparison.interfaces.api.v1.schemas.comparison import (
    AddQuoteRequest,
    CreateComparisonRequest,
    HealthResponse,
    UpdateComparisonRequest,
    UpdateScoringCriteriaRequest,
)

__all__ = [
    "AddQuoteRequest",
    "CreateComparisonRequest",
    "HealthResponse",
    "UpdateComparisonRequest",
    "UpdateScoringCriteriaRequest",
]
