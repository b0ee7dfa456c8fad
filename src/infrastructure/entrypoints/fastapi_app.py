"""
FastAPI entry point.

create_app() is the Composition Root for HTTP runs: it wires the
infrastructure adapters (or the ones a test passes in) and exposes the
quote and recommendation endpoints.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse

from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.composition import Container, build_container
from src.infrastructure.entrypoints.schemas import (
    AnalysisRequest,
    ErrorResponse,
    RecommendationResponse,
    StockDataResponse,
)
from src.infrastructure.observability.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    container = container or build_container(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        container.close()

    app = FastAPI(title="Stock Insight API", lifespan=lifespan)

    @app.get(
        "/api/stock-data",
        response_model=StockDataResponse,
        responses={400: {"model": ErrorResponse}},
    )
    def get_stock_data(symbol: Optional[str] = None):
        """Quote plus 30-day chart; synthesized when the provider cannot answer."""
        if not symbol or not symbol.strip():
            return _error(400, "Stock symbol is required")
        snapshot = container.snapshot_use_case.execute(symbol)
        return StockDataResponse.from_snapshot(snapshot)

    @app.post(
        "/api/ai-analysis",
        response_model=RecommendationResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def analyze_stock(body: Optional[AnalysisRequest] = Body(default=None)):
        """Recommendation for the posted quote; rule-based when the model is unavailable."""
        if body is None or not body.symbol or body.stock_data is None:
            return _error(400, "Symbol and stock data are required")
        try:
            recommendation = container.recommendation_use_case.execute(
                body.symbol, body.stock_data.to_quote(body.symbol)
            )
        except Exception:
            logger.exception("Could not build a recommendation for %s", body.symbol)
            return _error(500, "Failed to analyze stock data")
        return RecommendationResponse.from_entity(recommendation)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


load_dotenv()
app = create_app()
