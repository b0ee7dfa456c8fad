"""
Domain entities for investment recommendations.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from enum import Enum


class Action(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


MAX_KEY_POINTS = 5


@dataclass(frozen=True)
class Recommendation:
    action: Action
    confidence: int
    analysis: str
    key_points: list[str] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.MEDIUM
    risk_factors: list[str] = field(default_factory=list)
