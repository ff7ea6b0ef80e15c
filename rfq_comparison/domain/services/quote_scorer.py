"""Quote scoring domain service.

This module implements the per-criterion scoring of supplier quotes. Every
sub-score is normalized to 0-100 and combined into an overall score:

    OverallScore = sum(SubScore_c * Weight_c / 100) for c in Criterion

Scoring is pure and stateless. Once the empty-input guard passes, malformed
data degrades to documented defaults instead of raising.
"""

import re
from datetime import datetime
from enum import Enum

import structlog

from rfq_comparison.domain.entities.comparison import QuoteScore, ScoringCriteria
from rfq_comparison.domain.value_objects.quote import Quote, QuoteItem
from rfq_comparison.shared.config.scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
)
from rfq_comparison.shared.exceptions import NoQuotesError
from rfq_comparison.shared.utils.timezone import now_utc

logger = structlog.get_logger(__name__)

_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


class Criterion(str, Enum):
    """Scoring criteria a quote is evaluated on."""

    PRICE = "price"
    QUALITY = "quality"
    DELIVERY = "delivery"
    COMPLIANCE = "compliance"

    def weight(self, criteria: ScoringCriteria) -> float:
        """Weight configured for this criterion."""
        return float(getattr(criteria, f"{self.value}_weight"))


STRENGTH_PHRASES: dict[Criterion, str] = {
    Criterion.PRICE: "Highly competitive pricing",
    Criterion.QUALITY: "Excellent quality indicators",
    Criterion.DELIVERY: "Fast delivery timeframe",
    Criterion.COMPLIANCE: "Strong compliance and certifications",
}

WEAKNESS_PHRASES: dict[Criterion, str] = {
    Criterion.PRICE: "Higher price compared to alternatives",
    Criterion.QUALITY: "Quality indicators below average",
    Criterion.DELIVERY: "Longer delivery timeframe",
    Criterion.COMPLIANCE: "Limited compliance certifications",
}


def parse_delivery_days(timeframe: str) -> float:
    """Parse a free-text delivery timeframe such as "6 weeks" into days.

    The leading number is multiplied by the first unit keyword found
    ("day", "week", "month"). Text without a unit keyword or numeric
    prefix yields 0.0, which callers treat as unknown.

    Args:
        timeframe: Free-text delivery timeframe

    Returns:
        Number of days, or 0.0 when unparseable
    """
    return _parse_days(timeframe, DEFAULT_SCORING_CONFIG)


def _parse_days(timeframe: str, config: ScoringConfig) -> float:
    lower = (timeframe or "").lower()
    for keyword, multiplier in config.delivery_unit_days:
        if keyword in lower:
            match = _NUMERIC_PREFIX.match(lower)
            if not match:
                return 0.0
            return float(match.group(1)) * multiplier
    return 0.0


class QuoteScorer:
    """Domain service for scoring quotes against a set of weighted criteria.

    The scorer holds only its (immutable) heuristic configuration, so a single
    instance can be shared freely.
    """

    def __init__(self, config: ScoringConfig | None = None):
        """Initialize the scorer.

        Args:
            config: Scoring heuristics, defaults to the standard configuration
        """
        self.config = config or DEFAULT_SCORING_CONFIG

    def score_quotes(
        self,
        quotes: list[Quote],
        criteria: ScoringCriteria,
        calculated_at: datetime | None = None,
    ) -> list[QuoteScore]:
        """Score every quote in the compared set.

        Args:
            quotes: Quotes under comparison
            criteria: Criterion weights (assumed already validated)
            calculated_at: Optional timestamp to stamp on every score

        Returns:
            One QuoteScore per quote, in input order, without rank or
            recommendation

        Raises:
            NoQuotesError: If the quote list is empty
        """
        if not quotes:
            raise NoQuotesError()

        timestamp = calculated_at or now_utc()
        min_price = min(q.total_amount for q in quotes)
        max_price = max(q.total_amount for q in quotes)

        scores = []
        for quote in quotes:
            sub_scores = {
                Criterion.PRICE: self.price_score(quote, min_price, max_price),
                Criterion.QUALITY: self.quality_score(quote),
                Criterion.DELIVERY: self.delivery_score(quote),
                Criterion.COMPLIANCE: self.compliance_score(quote),
            }
            strengths, weaknesses = self.analyze_strengths_weaknesses(sub_scores)

            scores.append(
                QuoteScore(
                    quote_id=quote.id,
                    quote_number=quote.quote_number,
                    supplier_id=quote.supplier_id,
                    supplier_name=quote.supplier_name,
                    total_amount=quote.total_amount,
                    price_score=sub_scores[Criterion.PRICE],
                    quality_score=sub_scores[Criterion.QUALITY],
                    delivery_score=sub_scores[Criterion.DELIVERY],
                    compliance_score=sub_scores[Criterion.COMPLIANCE],
                    overall_score=self.overall_score(sub_scores, criteria),
                    strengths=strengths,
                    weaknesses=weaknesses,
                    calculated_at=timestamp,
                )
            )

        logger.debug("quotes_scored", quote_count=len(scores))
        return scores

    def overall_score(
        self, sub_scores: dict[Criterion, float], criteria: ScoringCriteria
    ) -> float:
        """Combine sub-scores with their criterion weights, clamped to 0-100.

        Weights may total up to 100.1 within tolerance, which alone could push
        a perfect quote slightly above 100.
        """
        return _clamp(
            sum(
                sub_scores[criterion] * criterion.weight(criteria) / 100.0
                for criterion in Criterion
            )
        )

    def price_score(self, quote: Quote, min_price: float, max_price: float) -> float:
        """Score price competitiveness (0-100, cheapest gets 100).

        Args:
            quote: Quote being scored
            min_price: Lowest total amount in the compared set
            max_price: Highest total amount in the compared set

        Returns:
            Linear inversion of the quote's position in the price range
        """
        if max_price == min_price:
            return 100.0
        return (max_price - quote.total_amount) / (max_price - min_price) * 100.0

    def quality_score(self, quote: Quote) -> float:
        """Score quality indicators (0-100).

        Three signals contribute their share: warranty tier, manufacturer
        reputation and specification completeness. Points are divided by the
        shares of the signals actually present, so a quote without items can
        still reach 100 on warranty alone.
        """
        points = 0.0
        shares = 0.0

        if quote.warranty_terms.strip():
            points += self.warranty_credit(quote.warranty_terms) * (
                self.config.warranty_share
            )
            shares += self.config.warranty_share

        if quote.items:
            if any(
                self.is_reputable_manufacturer(item.manufacturer_name)
                for item in quote.items
            ):
                points += self.config.manufacturer_share
            shares += self.config.manufacturer_share

            points += self.specification_completeness(quote.items) * (
                self.config.specification_share
            )
            shares += self.config.specification_share

        if shares == 0:
            return 0.0
        return _clamp(points / shares * 100.0)

    def warranty_credit(self, warranty_terms: str) -> float:
        """Credit for the longest warranty stated in the terms."""
        lower = warranty_terms.lower()
        for tier in self.config.warranty_tiers:
            if any(keyword in lower for keyword in tier.keywords):
                return tier.credit
        return self.config.default_warranty_credit

    def is_reputable_manufacturer(self, name: str) -> bool:
        """Check the manufacturer against the reputable brand list."""
        lower = name.lower()
        return any(brand in lower for brand in self.config.reputable_manufacturers)

    def specification_completeness(self, items: list[QuoteItem]) -> float:
        """Fraction of items with both specifications and a model number."""
        if not items:
            return 0.0
        complete = sum(
            1
            for item in items
            if item.specifications.strip() and item.model_number.strip()
        )
        return complete / len(items)

    def delivery_score(self, quote: Quote) -> float:
        """Score delivery speed (0-100) from the average item timeframe."""
        days = [
            _parse_days(item.delivery_timeframe, self.config) for item in quote.items
        ]
        valid = [d for d in days if d > 0]
        if not valid:
            return self.config.default_delivery_score

        avg_days = sum(valid) / len(valid)
        return _clamp(self.config.delivery_score_for_days(avg_days))

    def compliance_score(self, quote: Quote) -> float:
        """Score certifications (0-100) averaged across items."""
        if not quote.items:
            return 0.0
        total = sum(
            self.certification_credit(item.compliance_certs) for item in quote.items
        )
        return _clamp(total / len(quote.items) * 100.0)

    def certification_credit(self, certs: str) -> float:
        """Credit for certification keywords on a single item, capped at 1.0."""
        if not certs:
            return 0.0
        lower = certs.lower()
        credit = sum(
            rule.credit
            for rule in self.config.certification_credits
            if any(keyword in lower for keyword in rule.keywords)
        )
        return min(credit, self.config.max_item_compliance_credit)

    def analyze_strengths_weaknesses(
        self, sub_scores: dict[Criterion, float]
    ) -> tuple[list[str], list[str]]:
        """Tag each axis as a strength (>= 80) or weakness (< 50).

        Returns:
            Tuple of (strengths, weaknesses) in criterion order
        """
        strengths: list[str] = []
        weaknesses: list[str] = []
        for criterion in Criterion:
            score = sub_scores[criterion]
            if score >= self.config.strength_threshold:
                strengths.append(STRENGTH_PHRASES[criterion])
            elif score < self.config.weakness_threshold:
                weaknesses.append(WEAKNESS_PHRASES[criterion])
        return strengths, weaknesses


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))
