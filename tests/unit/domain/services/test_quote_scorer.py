"""Unit tests for the quote scorer domain service.

This module tests each scoring criterion and the weighted overall score.
"""

import pytest

from rfq_comparison.domain.entities.comparison import ScoringCriteria
from rfq_comparison.domain.services import (
    STRENGTH_PHRASES,
    WEAKNESS_PHRASES,
    Criterion,
    QuoteScorer,
    parse_delivery_days,
)
from rfq_comparison.shared.exceptions import NoQuotesError
from tests.fixtures import bare_quote_pair, detailed_quotes, make_item, make_quote


@pytest.fixture
def scorer():
    """Create a scorer with the default heuristics."""
    return QuoteScorer()


@pytest.fixture
def default_criteria():
    """Default 40/30/20/10 weights."""
    return ScoringCriteria()


class TestParseDeliveryDays:
    """Test cases for free-text delivery parsing."""

    @pytest.mark.parametrize(
        "timeframe, expected",
        [
            ("10 days", 10.0),
            ("10 business days", 10.0),
            ("6 weeks", 42.0),
            ("2 Weeks", 14.0),
            ("3 months", 90.0),
            ("1.5 months", 45.0),
            ("30 days (1 month)", 30.0),
        ],
    )
    def test_parses_leading_number_and_unit(self, timeframe, expected):
        assert parse_delivery_days(timeframe) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "timeframe", ["", "ASAP", "weeks", "about 3 weeks", "in stock", "14"]
    )
    def test_unparseable_text_is_zero(self, timeframe):
        assert parse_delivery_days(timeframe) == 0.0


class TestPriceScore:
    """Test cases for price competitiveness."""

    def test_cheapest_gets_100_and_most_expensive_gets_0(self, scorer):
        quotes = [
            make_quote("a", 100.0),
            make_quote("b", 150.0),
            make_quote("c", 200.0),
        ]
        assert scorer.price_score(quotes[0], 100.0, 200.0) == 100.0
        assert scorer.price_score(quotes[1], 100.0, 200.0) == pytest.approx(50.0)
        assert scorer.price_score(quotes[2], 100.0, 200.0) == 0.0

    def test_equal_totals_all_score_100(self, scorer, default_criteria):
        quotes = [make_quote("a", 500.0), make_quote("b", 500.0)]
        scores = scorer.score_quotes(quotes, default_criteria)
        assert [s.price_score for s in scores] == [100.0, 100.0]


class TestQualityScore:
    """Test cases for quality indicators."""

    def test_no_signals_scores_zero(self, scorer):
        assert scorer.quality_score(make_quote("a", 100.0)) == 0.0

    def test_warranty_alone_scales_to_full_range(self, scorer):
        quote = make_quote("a", 100.0, warranty_terms="3 year parts and labour")
        assert scorer.quality_score(quote) == pytest.approx(80.0)

    def test_all_signals_present(self, scorer):
        quote = make_quote(
            "a",
            100.0,
            warranty_terms="5-year warranty",
            items=[
                make_item(
                    manufacturer_name="Siemens Healthineers",
                    model_number="X1",
                    specifications="Full spec sheet",
                )
            ],
        )
        assert scorer.quality_score(quote) == pytest.approx(100.0)

    def test_partial_signals(self, scorer):
        quote = make_quote(
            "a",
            100.0,
            warranty_terms="standard warranty",
            items=[
                make_item(
                    id="1",
                    manufacturer_name="Medtronic",
                    model_number="M1",
                    specifications="spec",
                ),
                make_item(id="2", manufacturer_name="Acme"),
            ],
        )
        # 0.2 * 0.4 + 0.3 + 0.5 * 0.3
        assert scorer.quality_score(quote) == pytest.approx(53.0)

    def test_items_without_warranty(self, scorer):
        quote = make_quote("a", 100.0, items=[make_item(manufacturer_name="Acme")])
        assert scorer.quality_score(quote) == 0.0

    @pytest.mark.parametrize(
        "terms, credit",
        [
            ("5 year warranty", 1.0),
            ("3-year warranty", 0.8),
            ("2 year warranty", 0.6),
            ("1-year warranty", 0.4),
            ("90 day warranty", 0.2),
        ],
    )
    def test_warranty_tiers(self, scorer, terms, credit):
        assert scorer.warranty_credit(terms) == credit

    def test_reputable_manufacturer_is_case_insensitive(self, scorer):
        assert scorer.is_reputable_manufacturer("PHILIPS Healthcare")
        assert not scorer.is_reputable_manufacturer("Acme")

    def test_specification_completeness_requires_both_fields(self, scorer):
        items = [
            make_item(model_number="M1", specifications="spec"),
            make_item(model_number="M2", specifications=""),
            make_item(model_number="", specifications="spec"),
            make_item(model_number="M4", specifications="spec"),
        ]
        assert scorer.specification_completeness(items) == 0.5
        assert scorer.specification_completeness([]) == 0.0


class TestDeliveryScore:
    """Test cases for delivery speed."""

    def test_default_without_items(self, scorer):
        assert scorer.delivery_score(make_quote("a", 100.0)) == 50.0

    def test_default_when_nothing_parses(self, scorer):
        quote = make_quote("a", 100.0, items=[make_item(delivery_timeframe="TBD")])
        assert scorer.delivery_score(quote) == 50.0

    @pytest.mark.parametrize(
        "timeframe, expected",
        [
            ("2 weeks", 90.0 + 16.0 / 30.0 * 10.0),
            ("30 days", 90.0),
            ("45 days", 80.0),
            ("60 days", 70.0),
            ("3 months", 50.0),
            ("180 days", 0.0),
            ("12 months", 0.0),
        ],
    )
    def test_delivery_bands(self, scorer, timeframe, expected):
        quote = make_quote("a", 100.0, items=[make_item(delivery_timeframe=timeframe)])
        assert scorer.delivery_score(quote) == pytest.approx(expected)

    def test_unparseable_items_are_ignored_in_average(self, scorer):
        quote = make_quote(
            "a",
            100.0,
            items=[
                make_item(id="1", delivery_timeframe="10 days"),
                make_item(id="2", delivery_timeframe="TBD"),
            ],
        )
        assert scorer.delivery_score(quote) == pytest.approx(90.0 + 20.0 / 30.0 * 10.0)

    def test_very_fast_delivery_stays_within_bounds(self, scorer):
        quote = make_quote("a", 100.0, items=[make_item(delivery_timeframe="0.5 days")])
        assert scorer.delivery_score(quote) <= 100.0


class TestComplianceScore:
    """Test cases for compliance and certifications."""

    def test_no_items_scores_zero(self, scorer):
        assert scorer.compliance_score(make_quote("a", 100.0)) == 0.0

    def test_averaged_across_items(self, scorer):
        quote = make_quote(
            "a",
            100.0,
            items=[
                make_item(id="1", compliance_certs="FDA, CE Mark, ISO 13485"),
                make_item(id="2", compliance_certs="FDA"),
            ],
        )
        assert scorer.compliance_score(quote) == pytest.approx(65.0)

    def test_item_credit_is_capped(self, scorer):
        assert scorer.certification_credit("FDA CE ISO UL CSA") == pytest.approx(1.0)

    def test_empty_certs(self, scorer):
        assert scorer.certification_credit("") == 0.0

    def test_short_keywords_match_as_substrings(self, scorer):
        # "certified" contains "ce"
        assert scorer.certification_credit("certified") == pytest.approx(0.3)


class TestStrengthsWeaknesses:
    """Test cases for strength and weakness tagging."""

    def test_thresholds(self, scorer):
        strengths, weaknesses = scorer.analyze_strengths_weaknesses(
            {
                Criterion.PRICE: 80.0,
                Criterion.QUALITY: 79.9,
                Criterion.DELIVERY: 50.0,
                Criterion.COMPLIANCE: 49.9,
            }
        )
        assert strengths == [STRENGTH_PHRASES[Criterion.PRICE]]
        assert weaknesses == [WEAKNESS_PHRASES[Criterion.COMPLIANCE]]


class TestScoreQuotes:
    """Test cases for scoring a full quote set."""

    def test_empty_input_raises(self, scorer, default_criteria):
        with pytest.raises(NoQuotesError):
            scorer.score_quotes([], default_criteria)

    def test_bare_pair_scenario(self, scorer, default_criteria):
        first, second = scorer.score_quotes(bare_quote_pair(), default_criteria)

        assert first.price_score == 100.0
        assert second.price_score == 0.0
        assert first.quality_score == 0.0
        assert first.delivery_score == 50.0
        assert first.compliance_score == 0.0
        assert first.overall_score == pytest.approx(50.0)
        assert second.overall_score == pytest.approx(10.0)
        assert first.strengths == ["Highly competitive pricing"]
        assert first.weaknesses == [
            "Quality indicators below average",
            "Limited compliance certifications",
        ]

    def test_scores_keep_input_order_and_carry_quote_fields(
        self, scorer, default_criteria
    ):
        quotes = detailed_quotes()
        scores = scorer.score_quotes(quotes, default_criteria)

        assert [s.quote_id for s in scores] == ["a", "b", "c"]
        assert scores[0].supplier_name == "Alpha Medical"
        assert scores[1].total_amount == 10000.0
        assert all(s.rank == 0 and s.recommendation == "" for s in scores)

    def test_overall_is_weighted_sum(self, scorer):
        criteria = ScoringCriteria(
            price_weight=25, quality_weight=25, delivery_weight=25, compliance_weight=25
        )
        for score in scorer.score_quotes(detailed_quotes(), criteria):
            expected = (
                score.price_score * 0.25
                + score.quality_score * 0.25
                + score.delivery_score * 0.25
                + score.compliance_score * 0.25
            )
            assert abs(score.overall_score - expected) < 1e-9

    def test_overall_clamped_when_weights_total_within_tolerance(self, scorer):
        criteria = ScoringCriteria(
            price_weight=50.05,
            quality_weight=30.05,
            delivery_weight=0,
            compliance_weight=20,
        )
        criteria.validate_weights()
        item = make_item(
            manufacturer_name="Philips",
            model_number="MX450",
            specifications="12-inch display",
            compliance_certs="FDA, CE Mark, ISO 13485, UL",
        )
        quotes = [
            make_quote(quote_id, 500.0, warranty_terms="5 year", items=[item])
            for quote_id in ("a", "b")
        ]

        for score in scorer.score_quotes(quotes, criteria):
            assert score.price_score == 100.0
            assert score.quality_score == pytest.approx(100.0)
            assert score.compliance_score == pytest.approx(100.0)
            assert score.overall_score == 100.0

    def test_all_scores_within_bounds(self, scorer, default_criteria):
        for score in scorer.score_quotes(detailed_quotes(), default_criteria):
            for value in (
                score.price_score,
                score.quality_score,
                score.delivery_score,
                score.compliance_score,
                score.overall_score,
            ):
                assert 0.0 <= value <= 100.0

    def test_malformed_numbers_degrade_to_defaults(self, scorer, default_criteria):
        quotes = [
            make_quote("a", "not-a-number"),
            make_quote("b", 100.0, items=[{"quantity": "x", "unit_price": None}]),
        ]
        scores = scorer.score_quotes(quotes, default_criteria)
        assert scores[0].total_amount == 0.0
        assert scores[0].price_score == 100.0

    def test_scoring_is_deterministic(self, scorer, default_criteria):
        quotes = detailed_quotes()
        first = scorer.score_quotes(quotes, default_criteria)
        second = scorer.score_quotes(quotes, default_criteria)
        assert [s.model_dump(exclude={"calculated_at"}) for s in first] == [
            s.model_dump(exclude={"calculated_at"}) for s in second
        ]
