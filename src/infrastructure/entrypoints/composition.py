"""
Composition Root shared by the HTTP and CLI entrypoints: wires the
infrastructure adapters into the application use-cases.
"""

import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from src.application.services.fallback_policy import FallbackPolicy
from src.application.services.mock_data_synthesizer import MockDataSynthesizer
from src.application.services.rule_based_recommender import RuleBasedRecommender
from src.application.use_cases.get_recommendation import GetRecommendationUseCase
from src.application.use_cases.get_stock_snapshot import GetStockSnapshotUseCase
from src.domain.ports.llm_port import ILanguageModel
from src.domain.ports.market_data_port import IMarketDataProvider
from src.domain.ports.observability_port import IObservabilityHandler
from src.infrastructure.config.settings import Settings
from src.infrastructure.market_data.alpha_vantage_adapter import AlphaVantageMarketDataProvider

logger = logging.getLogger(__name__)


@dataclass
class Container:
    market_data: IMarketDataProvider
    snapshot_use_case: GetStockSnapshotUseCase
    recommendation_use_case: GetRecommendationUseCase
    observability: Optional[IObservabilityHandler] = None

    def close(self) -> None:
        if self.observability is not None:
            self.observability.flush()
        close = getattr(self.market_data, "close", None)
        if callable(close):
            close()


def _build_llm(
    settings: Settings, observability: Optional[IObservabilityHandler]
) -> Optional[ILanguageModel]:
    if not settings.openai_api_key:
        logger.info("OPENAI_API_KEY not set, recommendations will be rule-based")
        return None
    from src.infrastructure.llm.openai_adapter import OpenAIChatAdapter

    callbacks = [observability.as_callback()] if observability is not None else []
    return OpenAIChatAdapter(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        callbacks=callbacks,
    )


def _build_observability(settings: Settings) -> Optional[IObservabilityHandler]:
    if not settings.tracing_enabled:
        return None
    from src.infrastructure.observability.langfuse_adapter import (
        LangfuseObservabilityHandler,
    )

    return LangfuseObservabilityHandler(public_key=settings.langfuse_public_key)


def build_container(
    settings: Settings,
    market_data: Optional[IMarketDataProvider] = None,
    llm: Optional[ILanguageModel] = None,
    rng: Optional[random.Random] = None,
    today: Callable[[], date] = date.today,
) -> Container:
    """Build every dependency once.

    Args:
        settings:    Runtime configuration.
        market_data: Provider override; Alpha Vantage when omitted.
        llm:         Language model override; built from settings when omitted.
        rng:         Random source shared by the synthesizer and the recommender.
        today:       Calendar used for chart dates.
    """
    rng = rng or random.Random()
    observability = None
    if market_data is None:
        if not settings.alpha_vantage_api_key:
            logger.info("ALPHA_VANTAGE_API_KEY not set, using the demo key")
        market_data = AlphaVantageMarketDataProvider(
            api_key=settings.alpha_vantage_api_key,
            timeout=settings.http_timeout_seconds,
        )
    if llm is None:
        observability = _build_observability(settings)
        llm = _build_llm(settings, observability)

    synthesizer = MockDataSynthesizer(rng=rng, today=today)
    return Container(
        market_data=market_data,
        snapshot_use_case=GetStockSnapshotUseCase(
            market_data, FallbackPolicy(synthesizer, today=today)
        ),
        recommendation_use_case=GetRecommendationUseCase(llm, RuleBasedRecommender(rng)),
        observability=observability,
    )
