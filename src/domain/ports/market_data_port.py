"""
Port (interface) for market-data providers.
Infrastructure adapters (e.g. AlphaVantageMarketDataProvider) must implement this interface.

Implementations never raise for provider-side problems: they return a
Failure describing what went wrong.
"""

from abc import ABC, abstractmethod

from src.domain.entities.outcome import Outcome
from src.domain.entities.stock_quote import DailyClose, QuotePayload


class IMarketDataProvider(ABC):
    @abstractmethod
    def fetch_quote(self, symbol: str) -> Outcome[QuotePayload]:
        """Fetch the current quote for *symbol*."""
        ...

    @abstractmethod
    def fetch_daily_series(self, symbol: str) -> Outcome[list[DailyClose]]:
        """Fetch daily closes for *symbol*, newest first (provider order)."""
        ...
