"""Ranking and recommendation domain service.

This module orders scored quotes, derives price deltas and line-item
side-by-side views, and synthesizes the human-readable recommendations
stored on a comparison.
"""

from datetime import datetime

import structlog
from pydantic import BaseModel, Field

from rfq_comparison.domain.entities.comparison import (
    ItemComparison,
    ItemDetails,
    PriceDifference,
    QuoteScore,
    ScoringCriteria,
)
from rfq_comparison.domain.services.quote_scorer import QuoteScorer
from rfq_comparison.domain.value_objects.quote import Quote
from rfq_comparison.shared.config.scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
)

logger = structlog.get_logger(__name__)

NO_QUOTES_RECOMMENDATION = "No quotes to compare."


class ComparisonAnalysis(BaseModel):
    """Full result of one scoring run.

    Attributes:
        quote_scores: Scores ordered by rank (best first)
        price_differences: Price deltas in input order
        item_comparisons: Cross-quote line-item groups
        recommendation: Overall recommendation paragraph
    """

    quote_scores: list[QuoteScore] = Field(default_factory=list)
    price_differences: list[PriceDifference] = Field(default_factory=list)
    item_comparisons: list[ItemComparison] = Field(default_factory=list)
    recommendation: str = NO_QUOTES_RECOMMENDATION


class ComparisonRanker:
    """Domain service that ranks quote scores and explains the result."""

    def __init__(
        self,
        scorer: QuoteScorer | None = None,
        config: ScoringConfig | None = None,
    ):
        """Initialize the ranker.

        Args:
            scorer: Scorer used by analyze(), created from config if omitted
            config: Scoring heuristics, defaults to the standard configuration
        """
        self.config = config or (scorer.config if scorer else DEFAULT_SCORING_CONFIG)
        self.scorer = scorer or QuoteScorer(self.config)

    def analyze(
        self,
        quotes: list[Quote],
        criteria: ScoringCriteria,
        calculated_at: datetime | None = None,
    ) -> ComparisonAnalysis:
        """Run the full scoring pipeline for a set of quotes.

        Args:
            quotes: Quotes under comparison
            criteria: Criterion weights
            calculated_at: Optional timestamp stamped on every score

        Returns:
            ComparisonAnalysis with ranked scores and narrative

        Raises:
            NoQuotesError: If the quote list is empty
        """
        scores = self.scorer.score_quotes(quotes, criteria, calculated_at)
        ranked = self.rank_scores(scores)
        ranked = [
            score.model_copy(
                update={"recommendation": self.recommend(score, len(quotes))}
            )
            for score in ranked
        ]

        analysis = ComparisonAnalysis(
            quote_scores=ranked,
            price_differences=self.calculate_price_differences(quotes),
            item_comparisons=self.build_item_comparisons(quotes),
            recommendation=self.overall_recommendation(ranked, criteria),
        )

        logger.info(
            "comparison_analyzed",
            quote_count=len(quotes),
            best_quote_id=ranked[0].quote_id,
            best_overall_score=round(ranked[0].overall_score, 2),
        )
        return analysis

    def rank_scores(self, scores: list[QuoteScore]) -> list[QuoteScore]:
        """Order scores by overall score and assign 1-based ranks.

        The sort is stable, so equal scores keep their input order.

        Returns:
            New list of scores, best first, with rank set
        """
        ordered = sorted(scores, key=lambda s: s.overall_score, reverse=True)
        return [
            score.model_copy(update={"rank": position})
            for position, score in enumerate(ordered, start=1)
        ]

    def recommend(self, score: QuoteScore, total_quotes: int) -> str:
        """Templated recommendation for a ranked quote."""
        if score.rank == 1:
            return (
                f"Best overall choice with a score of {score.overall_score:.1f}. "
                "Recommended for award."
            )
        if score.rank == 2:
            return (
                f"Strong alternative with a score of {score.overall_score:.1f}. "
                "Consider as backup option."
            )
        if score.rank <= total_quotes // 2:
            return f"Good option with a score of {score.overall_score:.1f}."
        return (
            f"Lower-ranked option with a score of {score.overall_score:.1f}. "
            "May not be the best choice."
        )

    def calculate_price_differences(
        self, quotes: list[Quote]
    ) -> list[PriceDifference]:
        """Delta of every quote from the lowest total amount, in input order."""
        if not quotes:
            return []

        min_price = min(q.total_amount for q in quotes)
        differences = []
        for quote in quotes:
            diff = quote.total_amount - min_price
            percentage = diff / min_price * 100.0 if min_price > 0 else 0.0
            differences.append(
                PriceDifference(
                    quote_id=quote.id,
                    quote_number=quote.quote_number,
                    total_amount=quote.total_amount,
                    difference_from_lowest=diff,
                    percentage_from_lowest=percentage,
                )
            )
        return differences

    def build_item_comparisons(self, quotes: list[Quote]) -> list[ItemComparison]:
        """Group line items across quotes by equipment.

        Items are keyed by equipment id, falling back to equipment name. When
        a quote lists the same equipment twice, the last entry wins.
        """
        groups: dict[str, ItemComparison] = {}
        for quote in quotes:
            for item in quote.items:
                key = item.equipment_key
                if key not in groups:
                    groups[key] = ItemComparison(
                        equipment_id=item.equipment_id,
                        equipment_name=item.equipment_name,
                    )
                groups[key].quotes[quote.id] = ItemDetails(
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=item.total_price,
                    delivery_timeframe=item.delivery_timeframe,
                    manufacturer_name=item.manufacturer_name,
                    model_number=item.model_number,
                    specifications=item.specifications,
                    compliance_certs=item.compliance_certs,
                )
        return list(groups.values())

    def overall_recommendation(
        self, ranked_scores: list[QuoteScore], criteria: ScoringCriteria
    ) -> str:
        """Summarize the winning quote and the heavily weighted factors.

        Args:
            ranked_scores: Scores ordered best first
            criteria: Criterion weights used for the run

        Returns:
            Recommendation paragraph
        """
        if not ranked_scores:
            return NO_QUOTES_RECOMMENDATION

        best = ranked_scores[0]
        recommendation = (
            f"Based on the analysis of {len(ranked_scores)} quotes, "
            f"Quote {best.quote_number} from {best.supplier_name} is recommended "
            f"with an overall score of {best.overall_score:.1f}/100. "
        )

        factors = []
        if criteria.price_weight >= self.config.key_factor_price_weight:
            factors.append(f"price competitiveness ({best.price_score:.1f}/100)")
        if criteria.quality_weight >= self.config.key_factor_quality_weight:
            factors.append(f"quality indicators ({best.quality_score:.1f}/100)")
        if criteria.delivery_weight >= self.config.key_factor_delivery_weight:
            factors.append(f"delivery timeframe ({best.delivery_score:.1f}/100)")

        if factors:
            recommendation += "Key factors: " + ", ".join(factors) + "."

        return recommendation.rstrip()
