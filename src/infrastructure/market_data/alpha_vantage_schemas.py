"""
Pydantic models for the Alpha Vantage JSON payloads.

Alpha Vantage sends every value as a string keyed by a numbered label
("05. price"). Numbers are accepted and stringified, anything else is
treated as missing so decoding never fails on a single odd field.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.entities.stock_quote import DailyClose, QuotePayload


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class GlobalQuoteSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    symbol: Optional[str] = Field(default=None, alias="01. symbol")
    open: Optional[str] = Field(default=None, alias="02. open")
    high: Optional[str] = Field(default=None, alias="03. high")
    low: Optional[str] = Field(default=None, alias="04. low")
    price: Optional[str] = Field(default=None, alias="05. price")
    volume: Optional[str] = Field(default=None, alias="06. volume")
    latest_trading_day: Optional[str] = Field(default=None, alias="07. latest trading day")
    previous_close: Optional[str] = Field(default=None, alias="08. previous close")
    change: Optional[str] = Field(default=None, alias="09. change")
    change_percent: Optional[str] = Field(default=None, alias="10. change percent")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    def to_entity(self) -> QuotePayload:
        return QuotePayload(**self.model_dump())


class DailyBarSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    close: Optional[str] = Field(default=None, alias="4. close")

    @field_validator("close", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)


class GlobalQuoteResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    global_quote: Optional[GlobalQuoteSchema] = Field(default=None, alias="Global Quote")


class DailySeriesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    time_series: Optional[dict[str, DailyBarSchema]] = Field(
        default=None, alias="Time Series (Daily)"
    )

    def to_entities(self) -> list[DailyClose]:
        return [
            DailyClose(date=day, close=bar.close)
            for day, bar in (self.time_series or {}).items()
        ]
