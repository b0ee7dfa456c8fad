"""
Use-case: produce an investment recommendation for a quote.
Depends only on Domain ports and entities: no infrastructure imports.

The language model is optional. Without one, or when its call fails,
the rule-based recommender answers instead.
"""

import logging
from typing import Optional

from src.application.recommendation.parser import parse_recommendation
from src.application.recommendation.prompts import SYSTEM_PROMPT, build_analysis_prompt
from src.application.services.rule_based_recommender import RuleBasedRecommender
from src.domain.entities.outcome import Failure, FailureReason, Outcome, Success
from src.domain.entities.recommendation import Recommendation
from src.domain.entities.stock_quote import Quote
from src.domain.ports.llm_port import ILanguageModel

logger = logging.getLogger(__name__)


class GetRecommendationUseCase:
    def __init__(
        self,
        llm: Optional[ILanguageModel],
        fallback: RuleBasedRecommender,
    ) -> None:
        """
        Args:
            llm:      ILanguageModel implementation, or None when no credential
                      is configured.
            fallback: Recommender used whenever the model cannot answer.
        """
        self._llm = llm
        self._fallback = fallback

    def execute(self, symbol: str, quote: Quote) -> Recommendation:
        """Recommend BUY, SELL or HOLD for *symbol*.

        Raises:
            ValueError: if *symbol* is blank or *quote* is missing.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        if quote is None:
            raise ValueError("quote is required")

        outcome = self._request_completion(symbol, quote)
        if isinstance(outcome, Failure):
            logger.warning(
                "Using rule-based recommendation for %s (%s): %s",
                symbol,
                outcome.reason.value,
                outcome.detail,
            )
            return self._fallback.recommend(symbol, quote)
        return parse_recommendation(outcome.value)

    def _request_completion(self, symbol: str, quote: Quote) -> Outcome[str]:
        if self._llm is None:
            return Failure(FailureReason.MISSING_CREDENTIAL, "no language model configured")
        try:
            text = self._llm.complete(SYSTEM_PROMPT, build_analysis_prompt(symbol, quote))
        except Exception as exc:
            logger.exception("Recommendation request for %s failed", symbol)
            return Failure(FailureReason.COMPLETION_ERROR, str(exc))
        return Success(text or "")
