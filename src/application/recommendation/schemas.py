"""
Pydantic model for the JSON object the language model is asked to return.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.entities.recommendation import (
    MAX_KEY_POINTS,
    Action,
    Recommendation,
    RiskLevel,
)

DEFAULT_CONFIDENCE = 75


def clamp_confidence(value: int) -> int:
    return max(0, min(100, value))


class RecommendationPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: Action
    confidence: int = DEFAULT_CONFIDENCE
    analysis: str = ""
    key_points: list[str] = Field(default_factory=list, alias="keyPoints")
    risk_level: RiskLevel = Field(default=RiskLevel.MEDIUM, alias="riskLevel")
    risk_factors: list[str] = Field(default_factory=list, alias="riskFactors")

    @field_validator("action", mode="before")
    @classmethod
    def upper_action(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("confidence", mode="before")
    @classmethod
    def read_confidence(cls, value):
        if isinstance(value, str):
            value = value.strip().rstrip("%")
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"confidence must be finite, got {value!r}")
            value = round(value)
        return value

    @field_validator("confidence")
    @classmethod
    def clamp(cls, value: int) -> int:
        return clamp_confidence(value)

    @field_validator("risk_level", mode="before")
    @classmethod
    def title_risk(cls, value):
        return value.strip().capitalize() if isinstance(value, str) else value

    @field_validator("key_points")
    @classmethod
    def limit_key_points(cls, value: list[str]) -> list[str]:
        return value[:MAX_KEY_POINTS]

    def to_entity(self) -> Recommendation:
        return Recommendation(
            action=self.action,
            confidence=self.confidence,
            analysis=self.analysis,
            key_points=list(self.key_points),
            risk_level=self.risk_level,
            risk_factors=list(self.risk_factors),
        )
