import httpx
import pytest

from src.domain.entities.outcome import Failure, FailureReason, Success
from src.infrastructure.market_data.alpha_vantage_adapter import (
    AlphaVantageMarketDataProvider,
)

GLOBAL_QUOTE = {
    "Global Quote": {
        "01. symbol": "IBM",
        "02. open": "180.0000",
        "03. high": "184.5000",
        "04. low": "179.2500",
        "05. price": "183.1000",
        "06. volume": "4200000",
        "07. latest trading day": "2026-10-16",
        "08. previous close": "181.0000",
        "09. change": "2.1000",
        "10. change percent": "1.1602%",
    }
}

DAILY_SERIES = {
    "Meta Data": {"2. Symbol": "IBM"},
    "Time Series (Daily)": {
        "2026-10-16": {"1. open": "180.0", "4. close": "183.1000", "5. volume": "1"},
        "2026-10-15": {"1. open": "179.0", "4. close": "180.5000", "5. volume": "1"},
    },
}


def _provider(handler, api_key="secret"):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return AlphaVantageMarketDataProvider(api_key=api_key, client=client)


def _by_function(quote_body, series_body, status_code=200):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params["function"] == "GLOBAL_QUOTE":
            return httpx.Response(status_code, json=quote_body)
        return httpx.Response(status_code, json=series_body)

    return handler


def test_fetch_quote_decodes_numbered_fields():
    outcome = _provider(_by_function(GLOBAL_QUOTE, DAILY_SERIES)).fetch_quote("IBM")

    assert isinstance(outcome, Success)
    assert outcome.value.symbol == "IBM"
    assert outcome.value.price == "183.1000"
    assert outcome.value.change_percent == "1.1602%"
    assert outcome.value.latest_trading_day == "2026-10-16"


def test_fetch_daily_series_keeps_provider_order():
    outcome = _provider(_by_function(GLOBAL_QUOTE, DAILY_SERIES)).fetch_daily_series("IBM")

    assert isinstance(outcome, Success)
    assert [(bar.date, bar.close) for bar in outcome.value] == [
        ("2026-10-16", "183.1000"),
        ("2026-10-15", "180.5000"),
    ]


def test_request_parameters():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json=GLOBAL_QUOTE)

    provider = _provider(handler)
    provider.fetch_quote("IBM")
    provider.fetch_daily_series("IBM")

    assert seen[0] == {"function": "GLOBAL_QUOTE", "symbol": "IBM", "apikey": "secret"}
    assert seen[1] == {
        "function": "TIME_SERIES_DAILY",
        "symbol": "IBM",
        "apikey": "secret",
        "outputsize": "compact",
    }


def test_missing_key_uses_demo():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["apikey"])
        return httpx.Response(200, json=GLOBAL_QUOTE)

    _provider(handler, api_key=None).fetch_quote("IBM")

    assert seen == ["demo"]


@pytest.mark.parametrize(
    "body, reason",
    [
        ({"Error Message": "Invalid API call."}, FailureReason.PROVIDER_ERROR),
        ({"Note": "Thank you for using Alpha Vantage!"}, FailureReason.RATE_LIMITED),
        ({"Information": "API rate limit reached."}, FailureReason.RATE_LIMITED),
        ({}, FailureReason.MISSING_QUOTE),
        ({"Global Quote": "unexpected"}, FailureReason.MALFORMED_PAYLOAD),
        (["not", "an", "object"], FailureReason.MALFORMED_PAYLOAD),
    ],
)
def test_quote_failures(body, reason):
    outcome = _provider(_by_function(body, body)).fetch_quote("IBM")

    assert isinstance(outcome, Failure)
    assert outcome.reason == reason


def test_empty_global_quote_is_returned_for_the_policy_to_judge():
    outcome = _provider(_by_function({"Global Quote": {}}, DAILY_SERIES)).fetch_quote("NOPE")

    assert isinstance(outcome, Success)
    assert outcome.value.price is None


def test_numeric_values_are_stringified():
    body = {"Global Quote": {"05. price": 12.5, "06. volume": 100, "09. change": {"x": 1}}}

    outcome = _provider(_by_function(body, DAILY_SERIES)).fetch_quote("NUM")

    assert outcome.value.price == "12.5"
    assert outcome.value.volume == "100"
    assert outcome.value.change is None


def test_missing_series():
    outcome = _provider(_by_function(GLOBAL_QUOTE, {"Meta Data": {}})).fetch_daily_series("IBM")

    assert isinstance(outcome, Failure)
    assert outcome.reason == FailureReason.MISSING_SERIES


def test_transport_error_is_unreachable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = _provider(handler).fetch_quote("IBM")

    assert isinstance(outcome, Failure)
    assert outcome.reason == FailureReason.UNREACHABLE


def test_non_json_body_is_malformed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    outcome = _provider(handler).fetch_daily_series("IBM")

    assert isinstance(outcome, Failure)
    assert outcome.reason == FailureReason.MALFORMED_PAYLOAD


def test_http_error_status_is_provider_error():
    outcome = _provider(_by_function(GLOBAL_QUOTE, DAILY_SERIES, status_code=503)).fetch_quote("IBM")

    assert isinstance(outcome, Failure)
    assert outcome.reason == FailureReason.PROVIDER_ERROR
