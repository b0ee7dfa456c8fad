"""
Runtime configuration read from environment variables.

load_dotenv() is called by the entrypoints before from_env(), so a local
.env file works the same way as real environment variables. Every
credential is optional: without one the service degrades to synthesized
market data or rule-based recommendations.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_OPENAI_MODEL = "gpt-4"


def _optional(env: Mapping[str, str], key: str) -> Optional[str]:
    value = env.get(key, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    alpha_vantage_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    langfuse_public_key: Optional[str] = None
    langfuse_secret_key: Optional[str] = None
    http_timeout_seconds: float = 10.0
    log_level: str = "INFO"

    @property
    def tracing_enabled(self) -> bool:
        return bool(self.langfuse_public_key and self.langfuse_secret_key)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        try:
            timeout = float(env.get("HTTP_TIMEOUT_SECONDS", "10"))
        except ValueError:
            raise ValueError(
                f"HTTP_TIMEOUT_SECONDS must be a number, got {env['HTTP_TIMEOUT_SECONDS']!r}"
            ) from None
        return cls(
            alpha_vantage_api_key=_optional(env, "ALPHA_VANTAGE_API_KEY"),
            openai_api_key=_optional(env, "OPENAI_API_KEY"),
            openai_model=_optional(env, "OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            langfuse_public_key=_optional(env, "LANGFUSE_PUBLIC_KEY"),
            langfuse_secret_key=_optional(env, "LANGFUSE_SECRET_KEY"),
            http_timeout_seconds=timeout,
            log_level=env.get("LOG_LEVEL", "INFO"),
        )
