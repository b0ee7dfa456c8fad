"""
Use-case: look up a symbol and return its quote with a price-history chart.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from src.application.services.fallback_policy import FallbackPolicy
from src.domain.entities.stock_quote import StockSnapshot
from src.domain.ports.market_data_port import IMarketDataProvider


class GetStockSnapshotUseCase:
    def __init__(self, provider: IMarketDataProvider, policy: FallbackPolicy) -> None:
        self._provider = provider
        self._policy = policy

    def execute(self, symbol: str) -> StockSnapshot:
        """Fetch quote and daily series for *symbol* (uppercased).

        Provider problems never propagate: the policy substitutes
        synthesized data instead.

        Raises:
            ValueError: if *symbol* is blank.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        symbol = symbol.upper().strip()
        quote_outcome = self._provider.fetch_quote(symbol)
        series_outcome = self._provider.fetch_daily_series(symbol)
        return self._policy.resolve(symbol, quote_outcome, series_outcome)
