"""
Command-line search: look up a symbol and print the quote panel, a chart
summary and the recommendation, in that order.

    stock-insight AAPL
    stock-insight msft --no-recommendation
"""

import argparse
from typing import Optional

from dotenv import load_dotenv

from src.application.presenters.info_panel import InfoPanel, present_quote
from src.application.presenters.price_chart import PriceChart, present_chart
from src.application.presenters.recommendation_panel import (
    RecommendationPanel,
    present_recommendation,
)
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.composition import build_container
from src.infrastructure.observability.logging_setup import configure_logging


def render_info_panel(panel: InfoPanel) -> str:
    return "\n".join(
        [
            f"{panel.symbol}  {panel.name}",
            f"{panel.price}  {panel.change}",
            f"Open {panel.open}  High {panel.high}  Low {panel.low}  Volume {panel.volume}",
        ]
    )


def render_chart(chart: PriceChart) -> str:
    if chart.is_empty:
        return chart.message or ""
    return (
        f"{chart.labels[0]} - {chart.labels[-1]}: {len(chart.prices)} closes, "
        f"range {chart.low} - {chart.high}, last {chart.tooltips[-1]}"
    )


def render_recommendation(panel: RecommendationPanel) -> str:
    lines = [f"{panel.action}  ({panel.confidence})", "", panel.analysis, ""]
    lines.extend(f"  - {point}" for point in panel.key_points)
    lines.append("")
    lines.append(panel.risk_level)
    lines.extend(f"  - {factor}" for factor in panel.risk_factors)
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stock-insight",
        description="Show a stock quote, its 30-day chart and a recommendation.",
    )
    parser.add_argument("symbol", help="ticker symbol, e.g. AAPL")
    parser.add_argument(
        "--no-recommendation",
        action="store_true",
        help="skip the recommendation request",
    )
    args = parser.parse_args(argv)
    if not args.symbol.strip():
        parser.error("symbol must not be blank")

    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    container = build_container(settings)
    try:
        snapshot = container.snapshot_use_case.execute(args.symbol)
        print(render_info_panel(present_quote(snapshot.quote)))
        print(render_chart(present_chart(snapshot.chart)))
        if not args.no_recommendation:
            recommendation = container.recommendation_use_case.execute(
                snapshot.quote.symbol, snapshot.quote
            )
            print()
            print(render_recommendation(present_recommendation(recommendation)))
    finally:
        container.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
