"""
View model for the quote information panel.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.formatting import format_currency, format_signed, format_volume
from src.domain.entities.stock_quote import Quote


@dataclass(frozen=True)
class InfoPanel:
    symbol: str
    name: str
    price: str
    change: str
    is_positive: bool
    open: str
    high: str
    low: str
    volume: str


def present_quote(quote: Optional[Quote]) -> InfoPanel:
    quote = quote or Quote(symbol="", name="")
    return InfoPanel(
        symbol=quote.symbol or "N/A",
        name=quote.name or "Unknown",
        price=format_currency(quote.price),
        change=f"{format_signed(quote.change)} ({format_signed(quote.change_percent)}%)",
        is_positive=quote.is_positive,
        open=format_currency(quote.open),
        high=format_currency(quote.high),
        low=format_currency(quote.low),
        volume=format_volume(quote.volume),
    )
