"""
Domain entities for stock quotes and price history.
Zero external dependencies: pure Python dataclasses only.

Every numeric field is a finite number. Decoding of provider payloads
happens before these objects are built, so nothing downstream has to
guard against missing values.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Quote:
    symbol: str
    name: str
    price: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0
    volume: int = 0
    high: float = 0.0
    low: float = 0.0
    open: float = 0.0
    previous_close: float = 0.0

    @property
    def is_positive(self) -> bool:
        return self.change >= 0


@dataclass(frozen=True)
class ChartPoint:
    date: str
    price: float


@dataclass(frozen=True)
class StockSnapshot:
    """A quote and its chart series, built from the same lookup."""

    quote: Quote
    chart: list[ChartPoint] = field(default_factory=list)
    synthetic: bool = False


@dataclass(frozen=True)
class QuotePayload:
    """Raw GLOBAL_QUOTE fields exactly as the provider sent them."""

    symbol: Optional[str] = None
    open: Optional[str] = None
    high: Optional[str] = None
    low: Optional[str] = None
    price: Optional[str] = None
    volume: Optional[str] = None
    latest_trading_day: Optional[str] = None
    previous_close: Optional[str] = None
    change: Optional[str] = None
    change_percent: Optional[str] = None


@dataclass(frozen=True)
class DailyClose:
    date: str
    close: Optional[str] = None
