"""
Infrastructure adapter: Alpha Vantage REST API -> IMarketDataProvider.
All Alpha Vantage details (query functions, numbered field labels, limit
markers) are confined here; the rest of the codebase depends only on
IMarketDataProvider.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from src.domain.entities.outcome import Failure, FailureReason, Outcome, Success
from src.domain.entities.stock_quote import DailyClose, QuotePayload
from src.domain.ports.market_data_port import IMarketDataProvider
from src.infrastructure.market_data.alpha_vantage_schemas import (
    DailySeriesResponse,
    GlobalQuoteResponse,
)

logger = logging.getLogger(__name__)

DEMO_API_KEY = "demo"


class AlphaVantageMarketDataProvider(IMarketDataProvider):
    """Fetches quotes and daily closes from Alpha Vantage over HTTP."""

    BASE_URL = "https://www.alphavantage.co/query"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            api_key: Alpha Vantage key; the public "demo" key when empty.
            timeout: Per-request timeout in seconds.
            client:  Optional pre-built httpx.Client (tests pass one backed
                     by httpx.MockTransport).
        """
        self._api_key = api_key or DEMO_API_KEY
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def fetch_quote(self, symbol: str) -> Outcome[QuotePayload]:
        outcome = self._query("GLOBAL_QUOTE", symbol)
        if isinstance(outcome, Failure):
            return outcome
        try:
            parsed = GlobalQuoteResponse.model_validate(outcome.value)
        except ValidationError as exc:
            return Failure(FailureReason.MALFORMED_PAYLOAD, str(exc))
        if parsed.global_quote is None:
            return Failure(FailureReason.MISSING_QUOTE, f"no quote returned for {symbol!r}")
        return Success(parsed.global_quote.to_entity())

    def fetch_daily_series(self, symbol: str) -> Outcome[list[DailyClose]]:
        outcome = self._query("TIME_SERIES_DAILY", symbol, outputsize="compact")
        if isinstance(outcome, Failure):
            return outcome
        try:
            parsed = DailySeriesResponse.model_validate(outcome.value)
        except ValidationError as exc:
            return Failure(FailureReason.MALFORMED_PAYLOAD, str(exc))
        if parsed.time_series is None:
            return Failure(FailureReason.MISSING_SERIES, f"no daily series for {symbol!r}")
        return Success(parsed.to_entities())

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _query(self, function: str, symbol: str, **extra: str) -> Outcome[dict[str, Any]]:
        params = {"function": function, "symbol": symbol, "apikey": self._api_key, **extra}
        try:
            response = self._client.get(self.BASE_URL, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s request for %s failed: %s", function, symbol, exc)
            return Failure(FailureReason.UNREACHABLE, str(exc))

        if response.is_error:
            return Failure(
                FailureReason.PROVIDER_ERROR, f"HTTP {response.status_code} from {function}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            return Failure(FailureReason.MALFORMED_PAYLOAD, f"invalid JSON: {exc}")
        if not isinstance(body, dict):
            return Failure(FailureReason.MALFORMED_PAYLOAD, "expected a JSON object")

        if body.get("Error Message"):
            return Failure(FailureReason.PROVIDER_ERROR, str(body["Error Message"]))
        limit_note = body.get("Note") or body.get("Information")
        if limit_note:
            return Failure(FailureReason.RATE_LIMITED, str(limit_note))
        return Success(body)
