import json
import random

import pytest
from fastapi.testclient import TestClient

from conftest import FakeLanguageModel, FakeMarketDataProvider, daily_closes, quote_payload
from src.domain.entities.outcome import Success
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.composition import build_container
from src.infrastructure.entrypoints.fastapi_app import create_app

STOCK_DATA = {
    "symbol": "IBM",
    "price": 183.1,
    "change": 2.1,
    "changePercent": 3.2,
    "volume": 4200000,
    "high": 184.5,
    "low": 179.25,
    "open": 180.0,
    "previousClose": 181.0,
}


def _client(provider=None, llm=None, today=None):
    settings = Settings()
    extra = {"today": today} if today is not None else {}
    container = build_container(
        settings,
        market_data=provider or FakeMarketDataProvider(),
        llm=llm,
        rng=random.Random(3),
        **extra,
    )
    return TestClient(create_app(settings=settings, container=container))


@pytest.fixture
def client(healthy_provider, today):
    return _client(provider=healthy_provider, today=today)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_stock_data_shape(client):
    response = client.get("/api/stock-data", params={"symbol": "ibm"})

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {
        "symbol", "name", "price", "change", "changePercent", "volume",
        "high", "low", "open", "previousClose", "chartData",
    }
    assert body["symbol"] == "IBM"
    assert body["changePercent"] == pytest.approx(1.1602)
    assert body["chartData"][-1] == {"date": "Oct 17", "price": body["price"]}


def test_stock_data_falls_back_when_provider_is_down(today):
    response = _client(today=today).get("/api/stock-data", params={"symbol": "MSFT"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "MSFT Inc."
    assert len(body["chartData"]) == 30
    assert body["chartData"][-1]["date"] == "Oct 17"


@pytest.mark.parametrize("params", [{}, {"symbol": ""}, {"symbol": "  "}])
def test_stock_data_requires_symbol(client, params):
    response = client.get("/api/stock-data", params=params)

    assert response.status_code == 400
    assert response.json() == {"error": "Stock symbol is required"}


def test_analysis_without_model_is_rule_based(client):
    response = client.post("/api/ai-analysis", json={"symbol": "IBM", "stockData": STOCK_DATA})

    assert response.status_code == 200
    body = response.json()
    assert body["action"] == "BUY"
    assert 75 <= body["confidence"] <= 94
    assert body["riskLevel"] == "Medium"
    assert len(body["keyPoints"]) == 5
    assert body["riskFactors"] == ["Market volatility", "Economic conditions", "Company-specific factors"]


def test_analysis_with_model(healthy_provider):
    llm = FakeLanguageModel(
        response="```json\n" + json.dumps({"action": "SELL", "confidence": 90}) + "\n```"
    )
    response = _client(provider=healthy_provider, llm=llm).post(
        "/api/ai-analysis", json={"symbol": "IBM", "stockData": STOCK_DATA}
    )

    assert response.status_code == 200
    assert response.json()["action"] == "SELL"
    assert response.json()["confidence"] == 90


def test_analysis_defaults_missing_and_garbled_fields(client):
    response = client.post(
        "/api/ai-analysis",
        json={"symbol": "IBM", "stockData": {"price": "abc", "volume": None}},
    )

    assert response.status_code == 200
    assert "trading at $0.00" in response.json()["analysis"]


@pytest.mark.parametrize(
    "payload",
    [{}, {"symbol": "IBM"}, {"stockData": STOCK_DATA}, {"symbol": "", "stockData": STOCK_DATA}],
)
def test_analysis_requires_symbol_and_stock_data(client, payload):
    response = client.post("/api/ai-analysis", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Symbol and stock data are required"}


def test_analysis_without_body(client):
    response = client.post("/api/ai-analysis")

    assert response.status_code == 400


def test_analysis_reports_unexpected_failure(client, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(
        "src.application.use_cases.get_recommendation.GetRecommendationUseCase.execute",
        explode,
    )
    response = client.post("/api/ai-analysis", json={"symbol": "IBM", "stockData": STOCK_DATA})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze stock data"}


def test_analysis_survives_infinite_model_confidence(healthy_provider):
    llm = FakeLanguageModel(response='{"action": "BUY", "confidence": 1e999}')
    response = _client(provider=healthy_provider, llm=llm).post(
        "/api/ai-analysis", json={"symbol": "IBM", "stockData": STOCK_DATA}
    )

    assert response.status_code == 200
    assert response.json()["action"] == "BUY"
    assert response.json()["confidence"] == 75


def test_stock_data_with_oversized_volume(today):
    provider = FakeMarketDataProvider(
        quote_outcome=Success(quote_payload(volume="9" * 5000)),
        series_outcome=Success(daily_closes()),
    )

    response = _client(provider=provider, today=today).get(
        "/api/stock-data", params={"symbol": "IBM"}
    )

    assert response.status_code == 200
    assert response.json()["volume"] == 0
    assert response.json()["price"] == pytest.approx(183.10)


@pytest.mark.parametrize(
    "payload",
    [
        {"symbol": "IBM", "stockData": "not an object"},
        {"symbol": "IBM", "stockData": ["a", 1]},
        {"symbol": 1234, "stockData": STOCK_DATA},
        {"symbol": "IBM", "stockData": {"symbol": 5, "name": [], "volume": "9" * 5000}},
    ],
)
def test_analysis_defaults_loosely_typed_bodies(client, payload):
    response = client.post("/api/ai-analysis", json=payload)

    assert response.status_code == 200
    assert response.json()["action"] in {"BUY", "SELL", "HOLD"}


def test_analysis_with_non_object_stock_data_uses_zero_quote(client):
    response = client.post("/api/ai-analysis", json={"symbol": "IBM", "stockData": "x"})

    assert "trading at $0.00" in response.json()["analysis"]


@pytest.mark.parametrize("stock_data", [False, 0, ""])
def test_analysis_with_empty_stock_data_is_rejected(client, stock_data):
    response = client.post("/api/ai-analysis", json={"symbol": "IBM", "stockData": stock_data})

    assert response.status_code == 400
