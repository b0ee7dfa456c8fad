"""
Defensive decoding of raw provider records into Quote and ChartPoint values.
Depends only on Domain entities: no infrastructure imports.

Numbers are read the way a lenient client would read them: the longest
numeric prefix wins ("1.23%" -> 1.23) and anything unreadable becomes the
supplied default. Nothing here returns NaN or infinity.
"""

import math
import re
from datetime import date
from typing import Any, Optional

from src.domain.entities.stock_quote import ChartPoint, DailyClose, Quote, QuotePayload

CHART_WINDOW = 30

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def safe_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else default
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return default
    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else default


def safe_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, int):
        return value
    match = _INT_PREFIX.match(str(value))
    if not match:
        return default
    try:
        return int(match.group(0))
    except ValueError:
        # More digits than int() will convert.
        return default


def parse_change_percent(value: Optional[str]) -> float:
    """Parse a provider change percent such as '-0.4521%'."""
    return safe_float((value or "0%").replace("%", ""))


def format_chart_date(day: date) -> str:
    """Short month + day label, e.g. 'Jan 5'."""
    return f"{day.strftime('%b')} {day.day}"


def has_price(payload: QuotePayload) -> bool:
    return bool(payload.price)


def normalize_quote(payload: QuotePayload, requested_symbol: str) -> Quote:
    symbol = payload.symbol or requested_symbol
    return Quote(
        symbol=symbol,
        # GLOBAL_QUOTE carries no company name.
        name=symbol,
        price=safe_float(payload.price),
        change=safe_float(payload.change),
        change_percent=parse_change_percent(payload.change_percent),
        volume=max(safe_int(payload.volume), 0),
        high=safe_float(payload.high),
        low=safe_float(payload.low),
        open=safe_float(payload.open),
        previous_close=safe_float(payload.previous_close),
    )


def parse_daily_series(closes: list[DailyClose]) -> list[ChartPoint]:
    """Turn provider-ordered closes (newest first) into an ascending chart.

    Raises:
        ValueError: if a date or close in the window cannot be read.
    """
    points = []
    for entry in closes[:CHART_WINDOW]:
        price = safe_float(entry.close, default=math.nan)
        if math.isnan(price):
            raise ValueError(f"Unreadable close {entry.close!r} on {entry.date}")
        day = date.fromisoformat(entry.date)
        points.append(ChartPoint(date=format_chart_date(day), price=price))
    points.reverse()
    return points


def apply_freshness_patch(
    chart: list[ChartPoint], price: float, today: date
) -> list[ChartPoint]:
    """Make the rightmost point carry the live *price*.

    Today's point is overwritten when present; otherwise a point dated
    today is appended and the series is trimmed back to the window. An
    empty chart is returned unchanged.
    """
    if not chart:
        return chart
    today_label = format_chart_date(today)
    if chart[-1].date == today_label:
        return chart[:-1] + [ChartPoint(date=today_label, price=price)]
    return (chart + [ChartPoint(date=today_label, price=price)])[-CHART_WINDOW:]
