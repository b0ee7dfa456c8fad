"""
Request and response bodies for the HTTP API (camelCase on the wire).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.application.services.quote_normalizer import safe_float, safe_int
from src.domain.entities.recommendation import Recommendation
from src.domain.entities.stock_quote import Quote, StockSnapshot


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChartPointBody(_CamelModel):
    date: str
    price: float


class StockDataResponse(_CamelModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    high: float
    low: float
    open: float
    previous_close: float
    chart_data: list[ChartPointBody]

    @classmethod
    def from_snapshot(cls, snapshot: StockSnapshot) -> "StockDataResponse":
        quote = snapshot.quote
        return cls(
            symbol=quote.symbol,
            name=quote.name,
            price=quote.price,
            change=quote.change,
            change_percent=quote.change_percent,
            volume=quote.volume,
            high=quote.high,
            low=quote.low,
            open=quote.open,
            previous_close=quote.previous_close,
            chart_data=[
                ChartPointBody(date=point.date, price=point.price) for point in snapshot.chart
            ],
        )


class StockDataIn(_CamelModel):
    """Quote fields echoed back by the client; missing or unreadable values become 0."""

    symbol: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    change: Optional[float] = None
    change_percent: Optional[float] = None
    volume: Optional[int] = None
    high: Optional[float] = None
    low: Optional[float] = None
    open: Optional[float] = None
    previous_close: Optional[float] = None

    @field_validator("symbol", "name", mode="before")
    @classmethod
    def read_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator(
        "price", "change", "change_percent", "high", "low", "open", "previous_close",
        mode="before",
    )
    @classmethod
    def read_float(cls, value: Any) -> Optional[float]:
        return None if value is None else safe_float(value, default=None)

    @field_validator("volume", mode="before")
    @classmethod
    def read_int(cls, value: Any) -> Optional[int]:
        return None if value is None else safe_int(value, default=None)

    def to_quote(self, symbol: str) -> Quote:
        return Quote(
            symbol=self.symbol or symbol,
            name=self.name or self.symbol or symbol,
            price=self.price or 0.0,
            change=self.change or 0.0,
            change_percent=self.change_percent or 0.0,
            volume=max(self.volume or 0, 0),
            high=self.high or 0.0,
            low=self.low or 0.0,
            open=self.open or 0.0,
            previous_close=self.previous_close or 0.0,
        )


class AnalysisRequest(BaseModel):
    """Numeric symbols are stringified; a non-object stockData counts as empty."""

    symbol: Optional[str] = None
    stock_data: Optional[StockDataIn] = Field(default=None, alias="stockData")

    @field_validator("symbol", mode="before")
    @classmethod
    def read_symbol(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("stock_data", mode="before")
    @classmethod
    def read_stock_data(cls, value: Any) -> Any:
        if value is None or isinstance(value, dict):
            return value
        # Any other present value counts as stock data with every field unknown.
        return {} if value else None


class RecommendationResponse(_CamelModel):
    action: str
    confidence: int
    analysis: str
    key_points: list[str]
    risk_level: str
    risk_factors: list[str]

    @classmethod
    def from_entity(cls, recommendation: Recommendation) -> "RecommendationResponse":
        return cls(
            action=recommendation.action.value,
            confidence=recommendation.confidence,
            analysis=recommendation.analysis,
            key_points=recommendation.key_points,
            risk_level=recommendation.risk_level.value,
            risk_factors=recommendation.risk_factors,
        )


class ErrorResponse(BaseModel):
    error: str
