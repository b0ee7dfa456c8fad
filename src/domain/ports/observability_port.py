"""
Port (interface) for LLM tracing handlers.
Infrastructure adapters (e.g. LangfuseObservabilityHandler) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class IObservabilityHandler(ABC):
    @abstractmethod
    def as_callback(self) -> Any:
        """Return the framework-native callback (a LangChain CallbackHandler)."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Send buffered traces before the process exits."""
        ...
