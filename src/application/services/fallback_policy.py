"""
Decides when synthesized market data replaces what the provider returned.
Depends only on Domain entities: no infrastructure imports.

Kept apart from the network code so every substitution rule can be
exercised with hand-built outcomes.
"""

import logging
from datetime import date
from typing import Callable

from src.application.services import quote_normalizer
from src.application.services.mock_data_synthesizer import MockDataSynthesizer
from src.domain.entities.outcome import Failure, FailureReason, Outcome
from src.domain.entities.stock_quote import (
    ChartPoint,
    DailyClose,
    QuotePayload,
    StockSnapshot,
)

logger = logging.getLogger(__name__)


class FallbackPolicy:
    def __init__(
        self,
        synthesizer: MockDataSynthesizer,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._synthesizer = synthesizer
        self._today = today

    def resolve(
        self,
        symbol: str,
        quote_outcome: Outcome[QuotePayload],
        series_outcome: Outcome[list[DailyClose]],
    ) -> StockSnapshot:
        """Combine both fetch outcomes into a snapshot, substituting where needed.

        A missing quote or price replaces everything with synthesized data.
        A missing or unreadable series is replaced by a chart synthesized
        around the live price; a readable one gets the freshness patch.
        """
        if isinstance(quote_outcome, Failure):
            return self._synthesize(symbol, quote_outcome)
        payload = quote_outcome.value
        if not quote_normalizer.has_price(payload):
            return self._synthesize(
                symbol,
                Failure(FailureReason.MISSING_PRICE, "quote has no price field"),
            )

        quote = quote_normalizer.normalize_quote(payload, symbol)
        return StockSnapshot(quote=quote, chart=self._resolve_chart(quote.price, series_outcome))

    def _resolve_chart(
        self, price: float, series_outcome: Outcome[list[DailyClose]]
    ) -> list[ChartPoint]:
        if isinstance(series_outcome, Failure):
            logger.warning(
                "Daily series unavailable (%s), synthesizing chart around %.2f",
                series_outcome.reason.value,
                price,
            )
            return self._synthesizer.synthesize_chart(price)

        try:
            chart = quote_normalizer.parse_daily_series(series_outcome.value)
        except ValueError as exc:
            logger.warning("Could not parse daily series: %s", exc)
            return self._synthesizer.synthesize_chart(price)

        if not chart:
            logger.warning("Daily series is empty, synthesizing chart around %.2f", price)
            return self._synthesizer.synthesize_chart(price)
        return quote_normalizer.apply_freshness_patch(chart, price, self._today())

    def _synthesize(self, symbol: str, failure: Failure) -> StockSnapshot:
        logger.warning(
            "Using synthesized data for %s (%s): %s",
            symbol,
            failure.reason.value,
            failure.detail,
        )
        return self._synthesizer.synthesize_snapshot(symbol)
