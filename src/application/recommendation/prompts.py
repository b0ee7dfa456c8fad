"""
Prompt templates for the stock recommendation request.
Keeping the prompt in the application layer keeps it next to the parsing
rules that depend on its JSON shape.
"""

from src.application.formatting import format_currency, format_signed, format_volume
from src.domain.entities.stock_quote import Quote

SYSTEM_PROMPT = (
    "You are a professional financial analyst with expertise in stock market "
    "analysis. Provide clear, data-driven investment recommendations."
)

_ANALYSIS_TEMPLATE = """Analyze the following stock data and provide a comprehensive investment recommendation.

Stock Symbol: {symbol}
Current Price: {price}
Change: {change} ({change_percent}%)
Volume: {volume}
High: {high}
Low: {low}
Open: {open}
Previous Close: {previous_close}

Please provide:
1. A clear recommendation (BUY, SELL, or HOLD)
2. Your confidence level (0-100%)
3. A detailed analysis explaining your reasoning
4. Key points supporting your recommendation
5. Risk assessment with risk level (Low, Medium, High) and key risk factors

Format your response as JSON with the following structure:
{{
  "action": "BUY|SELL|HOLD",
  "confidence": 85,
  "analysis": "Detailed analysis text...",
  "keyPoints": ["Point 1", "Point 2", "Point 3"],
  "riskLevel": "Low|Medium|High",
  "riskFactors": ["Risk factor 1", "Risk factor 2"]
}}"""


def build_analysis_prompt(symbol: str, quote: Quote) -> str:
    return _ANALYSIS_TEMPLATE.format(
        symbol=symbol,
        price=format_currency(quote.price),
        change=format_signed(quote.change),
        change_percent=format_signed(quote.change_percent),
        volume=format_volume(quote.volume),
        high=format_currency(quote.high),
        low=format_currency(quote.low),
        open=format_currency(quote.open),
        previous_close=format_currency(quote.previous_close),
    )
