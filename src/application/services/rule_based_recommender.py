"""
Rule-based recommendation used whenever the language model cannot answer.
Depends only on Domain entities: no infrastructure imports.
"""

import random
from typing import Optional

from src.application.formatting import format_currency, format_millions
from src.domain.entities.recommendation import Action, Recommendation, RiskLevel
from src.domain.entities.stock_quote import Quote

MOMENTUM_THRESHOLD_PERCENT = 2
HIGH_RISK_THRESHOLD_PERCENT = 5
STRONG_INTEREST_VOLUME = 5_000_000

RISK_FACTORS = (
    "Market volatility",
    "Economic conditions",
    "Company-specific factors",
)

_OUTLOOK = {
    Action.BUY: "potential upside",
    Action.SELL: "potential downside",
    Action.HOLD: "sideways movement",
}

_MOMENTUM_POINT = {
    Action.BUY: "Positive momentum indicators",
    Action.SELL: "Negative momentum indicators",
    Action.HOLD: "Neutral market sentiment",
}


def decide_action(quote: Quote) -> Action:
    if quote.is_positive and quote.change_percent > MOMENTUM_THRESHOLD_PERCENT:
        return Action.BUY
    if not quote.is_positive and quote.change_percent < -MOMENTUM_THRESHOLD_PERCENT:
        return Action.SELL
    return Action.HOLD


def assess_risk(quote: Quote) -> RiskLevel:
    if abs(quote.change_percent) > HIGH_RISK_THRESHOLD_PERCENT:
        return RiskLevel.HIGH
    return RiskLevel.MEDIUM


class RuleBasedRecommender:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def recommend(self, symbol: str, quote: Quote) -> Recommendation:
        action = decide_action(quote)
        return Recommendation(
            action=action,
            confidence=75 + self._rng.randrange(20),
            analysis=self._analysis(symbol, quote, action),
            key_points=self._key_points(quote, action),
            risk_level=assess_risk(quote),
            risk_factors=list(RISK_FACTORS),
        )

    @staticmethod
    def _analysis(symbol: str, quote: Quote, action: Action) -> str:
        positive = quote.is_positive
        interest = "strong" if quote.volume > STRONG_INTEREST_VOLUME else "moderate"
        return (
            f"Based on the current market data for {symbol}, the stock is trading at "
            f"{format_currency(quote.price)}, representing a {'gain' if positive else 'loss'} "
            f"of {abs(quote.change_percent):.2f}% from the previous close.\n\n"
            f"The stock shows {'positive' if positive else 'negative'} momentum with a "
            f"current price {'above' if positive else 'below'} the opening price. "
            f"Volume activity of {format_millions(quote.volume)} shares indicates "
            f"{interest} market interest.\n\n"
            f"Technical indicators suggest {_OUTLOOK[action]}. Investors should consider "
            "their risk tolerance and investment horizon before making a decision."
        )

    @staticmethod
    def _key_points(quote: Quote, action: Action) -> list[str]:
        sign = "+" if quote.is_positive else ""
        return [
            f"Current price movement: {sign}{quote.change_percent:.2f}%",
            f"Trading range: {format_currency(quote.low)} - {format_currency(quote.high)}",
            f"Volume: {format_millions(quote.volume)} shares",
            _MOMENTUM_POINT[action],
            "Consider market conditions and company fundamentals",
        ]
