"""Comparison aggregate root.

This module defines the Comparison entity, which holds the set of quotes under
comparison for one RFQ, the scoring weights, and the results of the most
recent scoring run, together with its lifecycle state machine.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from rfq_comparison.shared.exceptions import (
    DuplicateQuoteError,
    InsufficientQuotesError,
    InvalidStateError,
    InvalidWeightsError,
    MinimumQuotesError,
    QuoteEditLockedError,
    QuoteNotInComparisonError,
    QuoteScoreNotFoundError,
)
from rfq_comparison.shared.utils.timezone import now_utc

MIN_QUOTES = 2
WEIGHT_TOTAL = 100.0
WEIGHT_TOLERANCE = 0.1


class ComparisonStatus(str, Enum):
    """Lifecycle status of a comparison."""

    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class ScoringCriteria(BaseModel):
    """Criterion weights, each a percentage of the overall score."""

    price_weight: float = Field(default=40.0, ge=0.0, le=100.0)
    quality_weight: float = Field(default=30.0, ge=0.0, le=100.0)
    delivery_weight: float = Field(default=20.0, ge=0.0, le=100.0)
    compliance_weight: float = Field(default=10.0, ge=0.0, le=100.0)

    @property
    def total(self) -> float:
        """Sum of the four weights."""
        return (
            self.price_weight
            + self.quality_weight
            + self.delivery_weight
            + self.compliance_weight
        )

    def validate_weights(self) -> None:
        """Ensure weights sum to 100.

        Raises:
            InvalidWeightsError: If the sum is outside 100 +/- 0.1
        """
        total = self.total
        if not (
            WEIGHT_TOTAL - WEIGHT_TOLERANCE <= total <= WEIGHT_TOTAL + WEIGHT_TOLERANCE
        ):
            raise InvalidWeightsError(total)


class QuoteScore(BaseModel):
    """Calculated score for a single quote. Regenerated on every run."""

    quote_id: str
    quote_number: str = ""
    supplier_id: str = ""
    supplier_name: str = ""
    total_amount: float = 0.0
    price_score: float = 0.0
    quality_score: float = 0.0
    delivery_score: float = 0.0
    compliance_score: float = 0.0
    overall_score: float = 0.0
    rank: int = 0
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendation: str = ""
    calculated_at: datetime = Field(default_factory=now_utc)


class PriceDifference(BaseModel):
    """Price delta of a quote from the cheapest quote in the set."""

    quote_id: str
    quote_number: str = ""
    total_amount: float = 0.0
    difference_from_lowest: float = 0.0
    percentage_from_lowest: float = 0.0


class ItemDetails(BaseModel):
    """Line-item details contributed by one quote to an item comparison."""

    quantity: int = 0
    unit_price: float = 0.0
    total_price: float = 0.0
    delivery_timeframe: str = ""
    manufacturer_name: str = ""
    model_number: str = ""
    specifications: str = ""
    compliance_certs: str = ""


class ItemComparison(BaseModel):
    """Side-by-side view of the same equipment across quotes."""

    equipment_id: str = ""
    equipment_name: str = ""
    quotes: dict[str, ItemDetails] = Field(default_factory=dict)


class Comparison(BaseModel):
    """Aggregate root for a quote comparison.

    The aggregate is a plain in-memory value. Callers load it, apply one
    operation, and save it; there is no internal locking.
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    tenant_id: str = Field(..., min_length=1)
    rfq_id: str = Field(..., min_length=1)
    title: str = ""
    description: str = ""
    quote_ids: list[str] = Field(default_factory=list)
    status: ComparisonStatus = ComparisonStatus.DRAFT
    scoring_criteria: ScoringCriteria = Field(default_factory=ScoringCriteria)
    quote_scores: list[QuoteScore] = Field(default_factory=list)
    price_differences: list[PriceDifference] = Field(default_factory=list)
    item_comparisons: list[ItemComparison] = Field(default_factory=list)
    best_overall_quote: str = ""
    best_price_quote: str = ""
    recommendation: str = ""
    notes: str = ""
    created_by: str = ""
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)
    completed_at: datetime | None = None

    @classmethod
    def create(
        cls,
        tenant_id: str,
        rfq_id: str,
        title: str,
        created_by: str,
        quote_ids: list[str],
        description: str = "",
        scoring_criteria: ScoringCriteria | None = None,
    ) -> "Comparison":
        """Create a new draft comparison.

        Args:
            tenant_id: Owning tenant
            rfq_id: RFQ whose quotes are compared
            title: Display title
            created_by: User creating the comparison
            quote_ids: Quotes to compare, at least two and no duplicates
            description: Optional description
            scoring_criteria: Optional weights, defaults to 40/30/20/10

        Returns:
            The new Comparison in draft status

        Raises:
            InsufficientQuotesError: If fewer than two quotes are given
            DuplicateQuoteError: If a quote id is repeated
            InvalidWeightsError: If the supplied weights do not sum to 100
        """
        if len(quote_ids) < MIN_QUOTES:
            raise InsufficientQuotesError(len(quote_ids))

        seen: set[str] = set()
        for quote_id in quote_ids:
            if quote_id in seen:
                raise DuplicateQuoteError(quote_id)
            seen.add(quote_id)

        criteria = scoring_criteria or ScoringCriteria()
        criteria.validate_weights()

        now = now_utc()
        return cls(
            tenant_id=tenant_id,
            rfq_id=rfq_id,
            title=title,
            description=description,
            quote_ids=list(quote_ids),
            scoring_criteria=criteria,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )

    def _touch(self) -> None:
        self.updated_at = now_utc()

    def _ensure_quotes_editable(self, action: str) -> None:
        if self.status in (ComparisonStatus.COMPLETED, ComparisonStatus.ARCHIVED):
            raise QuoteEditLockedError(action, self.status.value)

    def update_details(
        self,
        title: str | None = None,
        description: str | None = None,
        notes: str | None = None,
    ) -> None:
        """Update free-text fields. Omitted fields are left unchanged."""
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if notes is not None:
            self.notes = notes
        self._touch()

    def update_scoring_criteria(self, criteria: ScoringCriteria) -> None:
        """Replace the scoring weights. Does not trigger rescoring.

        Raises:
            InvalidWeightsError: If the weights do not sum to 100
        """
        criteria.validate_weights()
        self.scoring_criteria = criteria.model_copy()
        self._touch()

    def add_quote(self, quote_id: str) -> None:
        """Add a quote to the comparison.

        Raises:
            QuoteEditLockedError: If the comparison is completed or archived
            DuplicateQuoteError: If the quote is already included
        """
        self._ensure_quotes_editable("add")
        if quote_id in self.quote_ids:
            raise DuplicateQuoteError(quote_id)
        self.quote_ids.append(quote_id)
        self._touch()

    def remove_quote(self, quote_id: str) -> None:
        """Remove a quote from the comparison.

        Raises:
            QuoteEditLockedError: If the comparison is completed or archived
            QuoteNotInComparisonError: If the quote is not included
            MinimumQuotesError: If fewer than two quotes would remain
        """
        self._ensure_quotes_editable("remove")
        if quote_id not in self.quote_ids:
            raise QuoteNotInComparisonError(quote_id)

        remaining = [qid for qid in self.quote_ids if qid != quote_id]
        if len(remaining) < MIN_QUOTES:
            raise MinimumQuotesError(len(remaining), self.status.value)

        self.quote_ids = remaining
        self._touch()

    def activate(self) -> None:
        """Move a draft comparison to active.

        Raises:
            InvalidStateError: If the comparison is not a draft
            MinimumQuotesError: If fewer than two quotes are included
        """
        if self.status != ComparisonStatus.DRAFT:
            raise InvalidStateError(
                "Can only activate draft comparisons", self.status.value
            )
        if len(self.quote_ids) < MIN_QUOTES:
            raise MinimumQuotesError(len(self.quote_ids), self.status.value)
        self.status = ComparisonStatus.ACTIVE
        self._touch()

    def complete(self) -> None:
        """Move an active comparison to completed and stamp completion time.

        Raises:
            InvalidStateError: If the comparison is not active
        """
        if self.status != ComparisonStatus.ACTIVE:
            raise InvalidStateError(
                "Can only complete active comparisons", self.status.value
            )
        now = now_utc()
        self.status = ComparisonStatus.COMPLETED
        self.completed_at = now
        self.updated_at = now

    def archive(self) -> None:
        """Archive the comparison from any state.

        Raises:
            InvalidStateError: If the comparison is already archived
        """
        if self.status == ComparisonStatus.ARCHIVED:
            raise InvalidStateError("Comparison already archived", self.status.value)
        self.status = ComparisonStatus.ARCHIVED
        self._touch()

    def set_scores(self, scores: list[QuoteScore]) -> None:
        """Replace quote scores and recompute the best overall and best price quotes.

        The first quote wins on equal overall scores or equal amounts.
        """
        self.quote_scores = list(scores)
        self._touch()

        if not scores:
            return

        best_overall = scores[0]
        best_price = scores[0]
        for score in scores:
            if score.overall_score > best_overall.overall_score:
                best_overall = score
            if score.total_amount < best_price.total_amount:
                best_price = score

        self.best_overall_quote = best_overall.quote_id
        self.best_price_quote = best_price.quote_id

    def set_price_differences(self, differences: list[PriceDifference]) -> None:
        """Replace the price comparison data."""
        self.price_differences = list(differences)
        self._touch()

    def set_item_comparisons(self, comparisons: list[ItemComparison]) -> None:
        """Replace the item-level comparison data."""
        self.item_comparisons = list(comparisons)
        self._touch()

    def set_recommendation(self, recommendation: str) -> None:
        """Replace the overall recommendation."""
        self.recommendation = recommendation
        self._touch()

    def get_quote_score(self, quote_id: str) -> QuoteScore:
        """Retrieve the calculated score for a quote.

        Raises:
            QuoteScoreNotFoundError: If no score exists for the quote
        """
        for score in self.quote_scores:
            if score.quote_id == quote_id:
                return score
        raise QuoteScoreNotFoundError(quote_id)

    def is_quote_included(self, quote_id: str) -> bool:
        """Check whether a quote is part of the comparison."""
        return quote_id in self.quote_ids
