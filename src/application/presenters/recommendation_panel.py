"""
View model for the recommendation panel.
"""

from dataclasses import dataclass

from src.domain.entities.recommendation import Action, Recommendation

_TONE = {
    Action.BUY: "positive",
    Action.SELL: "negative",
    Action.HOLD: "neutral",
}


@dataclass(frozen=True)
class RecommendationPanel:
    action: str
    tone: str
    confidence: str
    analysis: str
    key_points: list[str]
    risk_level: str
    risk_factors: list[str]


def present_recommendation(recommendation: Recommendation) -> RecommendationPanel:
    return RecommendationPanel(
        action=recommendation.action.value,
        tone=_TONE[recommendation.action],
        confidence=f"AI Confidence: {recommendation.confidence}%",
        analysis=recommendation.analysis,
        key_points=list(recommendation.key_points),
        risk_level=f"Risk Level: {recommendation.risk_level.value}",
        risk_factors=list(recommendation.risk_factors),
    )
