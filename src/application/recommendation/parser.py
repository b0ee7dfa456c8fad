"""
Turns a raw model response into a Recommendation.

Preference order: JSON inside a ```json fence, JSON inside a bare ```
fence, the whole body as JSON, and finally heuristics over the free text.
"""

import json
import logging
import re

from src.application.recommendation.schemas import (
    DEFAULT_CONFIDENCE,
    RecommendationPayload,
    clamp_confidence,
)
from src.domain.entities.recommendation import (
    MAX_KEY_POINTS,
    Action,
    Recommendation,
    RiskLevel,
)

_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```")
_BARE_FENCE = re.compile(r"```\s*([\s\S]*?)\s*```")
_PERCENT = re.compile(r"(\d+)%")
_BULLET = re.compile(r"^[-•*]\s+")
_NUMBERED = re.compile(r"^\d+\.\s+")

logger = logging.getLogger(__name__)


def extract_json_text(response_text: str) -> str:
    match = _JSON_FENCE.search(response_text) or _BARE_FENCE.search(response_text)
    return match.group(1) if match else response_text


def parse_structured(content: str) -> Recommendation:
    """Strictly parse *content* as the requested JSON object.

    Raises:
        ValueError: if *content* is not JSON or does not fit the shape.
    """
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return RecommendationPayload.model_validate(data).to_entity()


def extract_action(text: str) -> Action:
    upper_text = text.upper()
    for action in (Action.BUY, Action.SELL, Action.HOLD):
        if action.value in upper_text:
            return action
    return Action.HOLD


def extract_confidence(text: str) -> int:
    match = _PERCENT.search(text)
    if not match:
        return DEFAULT_CONFIDENCE
    digits = match.group(1).lstrip("0") or "0"
    # Anything past three digits is over 100 anyway.
    return 100 if len(digits) > 3 else clamp_confidence(int(digits))


def extract_key_points(text: str) -> list[str]:
    points = []
    for line in text.split("\n"):
        if _BULLET.match(line) or _NUMBERED.match(line):
            points.append(_NUMBERED.sub("", _BULLET.sub("", line)).strip())
    return points[:MAX_KEY_POINTS]


def parse_free_text(text: str) -> Recommendation:
    return Recommendation(
        action=extract_action(text),
        confidence=extract_confidence(text),
        analysis=text,
        key_points=extract_key_points(text),
        risk_level=RiskLevel.MEDIUM,
        risk_factors=[],
    )


def parse_recommendation(response_text: str) -> Recommendation:
    try:
        return parse_structured(extract_json_text(response_text))
    except Exception as exc:
        logger.debug("Structured parse failed, reading free text: %s", exc)
        return parse_free_text(response_text)
