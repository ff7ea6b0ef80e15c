"""Scoring heuristics configuration module.

The keyword lists and credit weights below are hand-tuned procurement
heuristics. Changing any of them changes every stored score, so treat edits
as a policy decision.
"""

from pydantic import BaseModel, ConfigDict, Field


class KeywordCredit(BaseModel):
    """Credit awarded when any of the keywords appears in a text field."""

    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, ...] = Field(..., description="Lower-case substrings")
    credit: float = Field(..., ge=0.0, le=1.0, description="Credit for a match")
    label: str = Field(..., description="Descriptive label for the rule")


class DeliveryBand(BaseModel):
    """Piecewise-linear band mapping average delivery days to a score."""

    model_config = ConfigDict(frozen=True)

    max_days: float = Field(..., description="Upper bound of the band (inclusive)")
    base_score: float = Field(..., description="Score at the upper bound")
    span_score: float = Field(..., description="Extra score earned across the band")
    width_days: float = Field(..., gt=0, description="Band width in days")


class ScoringConfig(BaseModel):
    """Configuration for the quote scoring engine."""

    model_config = ConfigDict(frozen=True)

    # Quality signal shares (fractions of the 0-100 quality scale)
    warranty_share: float = Field(default=0.4)
    manufacturer_share: float = Field(default=0.3)
    specification_share: float = Field(default=0.3)

    # Warranty tiers, longest stated warranty first
    warranty_tiers: tuple[KeywordCredit, ...] = Field(
        default=(
            KeywordCredit(keywords=("5 year", "5-year"), credit=1.0, label="5 years"),
            KeywordCredit(keywords=("3 year", "3-year"), credit=0.8, label="3 years"),
            KeywordCredit(keywords=("2 year", "2-year"), credit=0.6, label="2 years"),
            KeywordCredit(keywords=("1 year", "1-year"), credit=0.4, label="1 year"),
        )
    )
    default_warranty_credit: float = Field(default=0.2)

    reputable_manufacturers: tuple[str, ...] = Field(
        default=(
            "siemens",
            "ge",
            "philips",
            "medtronic",
            "stryker",
            "boston scientific",
            "abbott",
            "johnson & johnson",
            "roche",
            "baxter",
            "becton dickinson",
            "cardinal health",
        )
    )

    certification_credits: tuple[KeywordCredit, ...] = Field(
        default=(
            KeywordCredit(keywords=("fda",), credit=0.4, label="FDA"),
            KeywordCredit(keywords=("ce", "ce mark"), credit=0.3, label="CE"),
            KeywordCredit(keywords=("iso",), credit=0.2, label="ISO"),
            KeywordCredit(keywords=("ul", "csa"), credit=0.1, label="UL/CSA"),
        )
    )
    max_item_compliance_credit: float = Field(default=1.0)

    # Delivery
    delivery_unit_days: tuple[tuple[str, float], ...] = Field(
        default=(("day", 1.0), ("week", 7.0), ("month", 30.0))
    )
    default_delivery_score: float = Field(default=50.0)
    delivery_bands: tuple[DeliveryBand, ...] = Field(
        default=(
            DeliveryBand(max_days=30, base_score=90.0, span_score=10.0, width_days=30),
            DeliveryBand(max_days=60, base_score=70.0, span_score=20.0, width_days=30),
            DeliveryBand(max_days=90, base_score=50.0, span_score=20.0, width_days=30),
        )
    )
    slow_delivery_decay_days: float = Field(default=90.0)

    # Strength / weakness bands
    strength_threshold: float = Field(default=80.0)
    weakness_threshold: float = Field(default=50.0)

    # Minimum criterion weight for a sub-score to be named as a key factor
    key_factor_price_weight: float = Field(default=40.0)
    key_factor_quality_weight: float = Field(default=30.0)
    key_factor_delivery_weight: float = Field(default=20.0)

    def delivery_score_for_days(self, avg_days: float) -> float:
        """Map an average delivery time in days to a 0-100 score.

        Args:
            avg_days: Average delivery time in days

        Returns:
            Delivery score
        """
        for band in self.delivery_bands:
            if avg_days <= band.max_days:
                return (
                    band.base_score
                    + (band.max_days - avg_days) / band.width_days * band.span_score
                )
        last = self.delivery_bands[-1]
        decay = (avg_days - last.max_days) / self.slow_delivery_decay_days
        return max(0.0, last.base_score - decay * last.base_score)


DEFAULT_SCORING_CONFIG = ScoringConfig()
