"""
View model for the price-history chart.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.application.formatting import format_currency
from src.domain.entities.stock_quote import ChartPoint

EMPTY_CHART_MESSAGE = "No chart data available"


@dataclass(frozen=True)
class PriceChart:
    labels: list[str] = field(default_factory=list)
    prices: list[float] = field(default_factory=list)
    tooltips: list[str] = field(default_factory=list)
    low: Optional[str] = None
    high: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.prices


def present_chart(points: Optional[list[ChartPoint]]) -> PriceChart:
    if not points:
        return PriceChart(message=EMPTY_CHART_MESSAGE)
    prices = [point.price for point in points]
    return PriceChart(
        labels=[point.date for point in points],
        prices=prices,
        tooltips=[f"{point.date}: {format_currency(point.price)}" for point in points],
        low=format_currency(min(prices)),
        high=format_currency(max(prices)),
    )
