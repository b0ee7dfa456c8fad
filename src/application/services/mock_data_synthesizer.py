"""
Synthesizes a plausible quote and 30-day price history when live data
cannot be used.
Depends only on Domain entities: no infrastructure imports.

The random source and the calendar are injected so callers can pin both.
Draw order is part of the contract: base price, change, volume, high, low,
then one draw per chart point and a final draw for the newest point.
"""

import math
import random
from datetime import date, timedelta
from typing import Callable, Optional

from src.application.services.quote_normalizer import CHART_WINDOW, format_chart_date
from src.domain.entities.stock_quote import ChartPoint, Quote, StockSnapshot


class MockDataSynthesizer:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._rng = rng or random.Random()
        self._today = today

    def synthesize_snapshot(
        self, symbol: str, seed_price: Optional[float] = None
    ) -> StockSnapshot:
        """Build a self-consistent quote and chart for *symbol*.

        Args:
            symbol:     Ticker echoed into the quote.
            seed_price: Anchor price. Drawn from [100, 300) when omitted.
        """
        rng = self._rng
        base_price = seed_price if seed_price is not None else 100 + rng.random() * 200
        change = (rng.random() - 0.5) * 10
        change_percent = change / base_price * 100 if base_price else 0.0
        volume = math.floor(rng.random() * 10_000_000) + 1_000_000
        high = base_price + rng.random() * 5
        low = base_price - rng.random() * 5

        quote = Quote(
            symbol=symbol,
            name=f"{symbol} Inc.",
            price=round(base_price, 2),
            change=round(change, 2),
            change_percent=round(change_percent, 2),
            volume=volume,
            high=round(high, 2),
            low=round(low, 2),
            open=round(base_price + change * 0.5, 2),
            previous_close=round(base_price - change, 2),
        )
        return StockSnapshot(
            quote=quote, chart=self.synthesize_chart(base_price), synthetic=True
        )

    def synthesize_chart(self, base_price: float = 100.0) -> list[ChartPoint]:
        """Return 30 ascending daily points drifting up towards *base_price*.

        Prices start near 95% of the anchor, follow a linear trend plus a
        slow sine wave and +/-2.5% noise. The newest point is then redrawn
        within +/-0.5% of the anchor.
        """
        rng = self._rng
        today = self._today()
        variation_range = base_price * 0.05
        starting_price = base_price * 0.95
        last = CHART_WINDOW - 1

        points = []
        for days_ago in range(last, -1, -1):
            trend_factor = (last - days_ago) / last
            random_variation = (rng.random() - 0.5) * variation_range
            smooth_wave = math.sin(days_ago / 5) * variation_range * 0.3
            price = (
                starting_price
                + (base_price - starting_price) * trend_factor
                + random_variation
                + smooth_wave
            )
            points.append(
                ChartPoint(
                    date=format_chart_date(today - timedelta(days=days_ago)),
                    price=round(price, 2),
                )
            )

        newest = base_price + (rng.random() - 0.5) * variation_range * 0.2
        points[-1] = ChartPoint(date=points[-1].date, price=round(newest, 2))
        return points
