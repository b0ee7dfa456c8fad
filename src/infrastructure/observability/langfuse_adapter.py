"""
Infrastructure adapter: Langfuse -> IObservabilityHandler.

Langfuse is imported lazily inside the methods so the module can be loaded
without Langfuse credentials; the composition root only builds this handler
when LANGFUSE_PUBLIC_KEY and LANGFUSE_SECRET_KEY are set.
"""

from typing import Any, Optional

from src.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Traces recommendation completions through the Langfuse LangChain callback."""

    def __init__(self, public_key: Optional[str] = None) -> None:
        from langfuse.langchain import CallbackHandler

        self._public_key = public_key
        self._handler = CallbackHandler(public_key=public_key)

    def as_callback(self) -> Any:
        return self._handler

    def flush(self) -> None:
        from langfuse import get_client

        get_client(public_key=self._public_key).flush()
