"""
Pydantic models for comparison API endpoints.

Responses reuse the domain models directly; these models only cover request
bodies and envelopes that have no domain counterpart.
"""

from pydantic import BaseModel, Field

from rfq_comparison.domain.entities.comparison import ScoringCriteria


class CreateComparisonRequest(BaseModel):
    """
    Request model for creating a comparison.

    Attributes:
        rfq_id: RFQ whose quotes are compared
        title: Display title
        description: Optional description
        quote_ids: Quotes to compare, at least two
    """

    rfq_id: str = Field(..., min_length=1, examples=["rfq_01"])
    title: str = Field("", max_length=255)
    description: str = ""
    quote_ids: list[str] = Field(
        default_factory=list,
        description="Identifiers of the quotes to compare",
        examples=[["quote_a", "quote_b"]],
    )


class UpdateComparisonRequest(BaseModel):
    """Partial update of free-text fields. Omitted fields are unchanged."""

    title: str | None = Field(None, max_length=255)
    description: str | None = None
    notes: str | None = None


class UpdateScoringCriteriaRequest(BaseModel):
    """New scoring weights. Must sum to 100."""

    price_weight: float = Field(..., ge=0.0, le=100.0)
    quality_weight: float = Field(..., ge=0.0, le=100.0)
    delivery_weight: float = Field(..., ge=0.0, le=100.0)
    compliance_weight: float = Field(..., ge=0.0, le=100.0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "price_weight": 50,
                    "quality_weight": 25,
                    "delivery_weight": 15,
                    "compliance_weight": 10,
                }
            ]
        }
    }

    def to_domain(self) -> ScoringCriteria:
        return ScoringCriteria(**self.model_dump())


class AddQuoteRequest(BaseModel):
    """Request model for adding a quote to a comparison."""

    quote_id: str = Field(..., min_length=1)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
