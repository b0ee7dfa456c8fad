"""
Port (interface) for language model providers.
Infrastructure adapters (e.g. OpenAIChatAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod


class ILanguageModel(ABC):
    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Request a single completion and return the response text.

        Raises:
            Any exception propagated from the provider SDK on failure.
        """
        ...
