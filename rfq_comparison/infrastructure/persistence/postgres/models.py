"""SQLAlchemy models for PostgreSQL database.

This module defines the ORM models that map to database tables. Nested
aggregate state is stored as JSONB on PostgreSQL and plain JSON elsewhere.
"""

from typing import Any

from sqlalchemy import JSON, Column, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

from rfq_comparison.domain.entities.comparison import Comparison
from rfq_comparison.shared.utils.timezone import ensure_utc

Base: Any = declarative_base()

JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class ComparisonModel(Base):
    """ORM model for quote_comparisons table."""

    __tablename__ = "quote_comparisons"

    id = Column(String(64), primary_key=True)
    tenant_id = Column(String(64), nullable=False)
    rfq_id = Column(String(64), nullable=False)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    quote_ids = Column(JSONDocument, nullable=False, default=list)
    status = Column(String(20), nullable=False, default="draft")
    scoring_criteria = Column(JSONDocument, nullable=False)
    quote_scores = Column(JSONDocument, nullable=False, default=list)
    price_differences = Column(JSONDocument, nullable=False, default=list)
    item_comparisons = Column(JSONDocument, nullable=False, default=list)
    best_overall_quote = Column(String(64), nullable=False, default="")
    best_price_quote = Column(String(64), nullable=False, default="")
    recommendation = Column(Text, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    created_by = Column(String(64), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_quote_comparisons_tenant_rfq", "tenant_id", "rfq_id"),
        Index("idx_quote_comparisons_tenant_status", "tenant_id", "status"),
    )

    def to_domain_entity(self) -> Comparison:
        """Convert ORM model to domain entity.

        Returns:
            Comparison domain entity
        """
        return Comparison.model_validate(
            {
                "id": self.id,
                "tenant_id": self.tenant_id,
                "rfq_id": self.rfq_id,
                "title": self.title,
                "description": self.description,
                "quote_ids": self.quote_ids or [],
                "status": self.status,
                "scoring_criteria": self.scoring_criteria or {},
                "quote_scores": self.quote_scores or [],
                "price_differences": self.price_differences or [],
                "item_comparisons": self.item_comparisons or [],
                "best_overall_quote": self.best_overall_quote,
                "best_price_quote": self.best_price_quote,
                "recommendation": self.recommendation,
                "notes": self.notes,
                "created_by": self.created_by,
                "created_at": ensure_utc(self.created_at),
                "updated_at": ensure_utc(self.updated_at),
                "completed_at": ensure_utc(self.completed_at),
            }
        )

    @staticmethod
    def column_values(entity: Comparison) -> dict[str, Any]:
        """Column values for a domain entity, JSON-encoded where nested.

        Args:
            entity: Comparison domain entity

        Returns:
            Mapping of column name to value
        """
        data = entity.model_dump(mode="json")
        return {
            "id": entity.id,
            "tenant_id": entity.tenant_id,
            "rfq_id": entity.rfq_id,
            "title": entity.title,
            "description": entity.description,
            "quote_ids": data["quote_ids"],
            "status": entity.status.value,
            "scoring_criteria": data["scoring_criteria"],
            "quote_scores": data["quote_scores"],
            "price_differences": data["price_differences"],
            "item_comparisons": data["item_comparisons"],
            "best_overall_quote": entity.best_overall_quote,
            "best_price_quote": entity.best_price_quote,
            "recommendation": entity.recommendation,
            "notes": entity.notes,
            "created_by": entity.created_by,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
            "completed_at": entity.completed_at,
        }

    @classmethod
    def from_domain_entity(cls, entity: Comparison) -> "ComparisonModel":
        """Create ORM model from domain entity.

        Args:
            entity: Comparison domain entity

        Returns:
            ComparisonModel instance
        """
        return cls(**cls.column_values(entity))
