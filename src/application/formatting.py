"""
Display formatting shared by prompts, rule-based analysis text and presenters.
"""


def format_currency(value: float) -> str:
    return f"${value:.2f}"


def format_signed(value: float) -> str:
    """Two decimals with an explicit '+' for zero and positive values."""
    return f"{'+' if value >= 0 else ''}{value:.2f}"


def format_volume(volume: int) -> str:
    return f"{volume:,}"


def format_millions(volume: int) -> str:
    return f"{volume / 1_000_000:.2f}M"
