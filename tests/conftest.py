import random
from datetime import date

import pytest

from src.domain.entities.outcome import Failure, FailureReason, Success
from src.domain.entities.stock_quote import DailyClose, QuotePayload
from src.domain.ports.llm_port import ILanguageModel
from src.domain.ports.market_data_port import IMarketDataProvider

TODAY = date(2026, 10, 17)


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float = 0.5) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class FakeMarketDataProvider(IMarketDataProvider):
    def __init__(self, quote_outcome=None, series_outcome=None) -> None:
        self.quote_outcome = quote_outcome or Failure(FailureReason.UNREACHABLE, "offline")
        self.series_outcome = series_outcome or Failure(FailureReason.UNREACHABLE, "offline")
        self.calls = []

    def fetch_quote(self, symbol):
        self.calls.append(("quote", symbol))
        return self.quote_outcome

    def fetch_daily_series(self, symbol):
        self.calls.append(("series", symbol))
        return self.series_outcome


class FakeLanguageModel(ILanguageModel):
    def __init__(self, response: str = "", error: Exception = None) -> None:
        self.response = response
        self.error = error
        self.prompts = []

    def complete(self, system_prompt, user_prompt):
        self.prompts.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.response


def quote_payload(**overrides) -> QuotePayload:
    fields = dict(
        symbol="IBM",
        open="180.00",
        high="184.50",
        low="179.25",
        price="183.10",
        volume="4200000",
        latest_trading_day="2026-10-16",
        previous_close="181.00",
        change="2.10",
        change_percent="1.1602%",
    )
    fields.update(overrides)
    return QuotePayload(**fields)


def daily_closes(count: int = 40, newest: date = date(2026, 10, 16)) -> list[DailyClose]:
    """Provider-ordered closes (newest first), one per calendar day."""
    return [
        DailyClose(date=date.fromordinal(newest.toordinal() - offset).isoformat(),
                   close=f"{170 + offset * 0.1:.4f}")
        for offset in range(count)
    ]


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def healthy_provider():
    return FakeMarketDataProvider(
        quote_outcome=Success(quote_payload()),
        series_outcome=Success(daily_closes()),
    )
