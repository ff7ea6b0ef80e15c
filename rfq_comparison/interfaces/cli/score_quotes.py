#!/usr/bin/env python3
"""Quote scoring CLI interface.

This module provides a command-line interface for scoring a JSON file of
supplier quotes without a database: quotes are scored, ranked and printed
as a table together with the award recommendation.
"""

import json
import logging
import sys
from pathlib import Path

import click
import structlog
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from rfq_comparison.domain.entities.comparison import ScoringCriteria
from rfq_comparison.domain.services.comparison_ranker import (
    ComparisonAnalysis,
    ComparisonRanker,
)
from rfq_comparison.domain.value_objects.quote import Quote
from rfq_comparison.shared.config.settings import get_settings
from rfq_comparison.shared.exceptions import ComparisonValidationError
from rfq_comparison.shared.utils.logger import configure_logging

logger = structlog.get_logger(__name__)
console = Console()

_QUOTES_ADAPTER = TypeAdapter(list[Quote])


def load_quotes(path: Path) -> list[Quote]:
    """Load quotes from a JSON file.

    The file holds either a list of quotes or an object with a "quotes" list.
    """
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("quotes", [])
    return _QUOTES_ADAPTER.validate_python(payload)


def format_scores_table(analysis: ComparisonAnalysis) -> Table:
    """Format ranked quote scores as a rich table."""
    table = Table(title="Quote Ranking", show_header=True, header_style="bold cyan")
    table.add_column("Rank", justify="right", style="green")
    table.add_column("Quote")
    table.add_column("Supplier")
    table.add_column("Total", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Quality", justify="right")
    table.add_column("Delivery", justify="right")
    table.add_column("Compliance", justify="right")
    table.add_column("Overall", justify="right", style="bold")

    for score in analysis.quote_scores:
        table.add_row(
            str(score.rank),
            score.quote_number or score.quote_id,
            score.supplier_name,
            f"{score.total_amount:,.2f}",
            f"{score.price_score:.1f}",
            f"{score.quality_score:.1f}",
            f"{score.delivery_score:.1f}",
            f"{score.compliance_score:.1f}",
            f"{score.overall_score:.1f}",
        )
    return table


@click.command()
@click.argument("quotes_json", type=click.Path(exists=True, path_type=Path))
@click.option("--price-weight", type=float, help="Price weight (percent)")
@click.option("--quality-weight", type=float, help="Quality weight (percent)")
@click.option("--delivery-weight", type=float, help="Delivery weight (percent)")
@click.option("--compliance-weight", type=float, help="Compliance weight (percent)")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path for the JSON analysis",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def score_quotes(
    quotes_json: Path,
    price_weight: float | None,
    quality_weight: float | None,
    delivery_weight: float | None,
    compliance_weight: float | None,
    output: Path | None,
    debug: bool,
) -> None:
    """Score and rank the supplier quotes in QUOTES_JSON.

    Weights not given on the command line fall back to the configured
    defaults (40/30/20/10) and must sum to 100.

    Example:
        $ score-quotes quotes.json --price-weight 50 --quality-weight 20
    """
    configure_logging("DEBUG" if debug else get_settings().monitoring.log_level)
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    defaults = get_settings().scoring
    try:
        criteria = ScoringCriteria(
            price_weight=(
                defaults.default_price_weight if price_weight is None else price_weight
            ),
            quality_weight=(
                defaults.default_quality_weight
                if quality_weight is None
                else quality_weight
            ),
            delivery_weight=(
                defaults.default_delivery_weight
                if delivery_weight is None
                else delivery_weight
            ),
            compliance_weight=(
                defaults.default_compliance_weight
                if compliance_weight is None
                else compliance_weight
            ),
        )
        criteria.validate_weights()

        quotes = load_quotes(quotes_json)
        logger.info("scoring_quotes", file=str(quotes_json), quote_count=len(quotes))
        analysis = ComparisonRanker().analyze(quotes, criteria)

    except ComparisonValidationError as e:
        logger.error("scoring_rejected", error_code=e.error_code, error=e.message)
        console.print(f"[red]Error: {e.message}[/red]")
        sys.exit(1)

    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("invalid_input", error=str(e))
        console.print(f"[red]Invalid input: {e}[/red]")
        sys.exit(1)

    console.print(format_scores_table(analysis))
    console.print(f"\n[bold]Recommendation:[/bold] {analysis.recommendation}")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(analysis.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"[cyan]Analysis saved to:[/cyan] {output}")


if __name__ == "__main__":
    score_quotes()
