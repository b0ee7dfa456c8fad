"""
Infrastructure adapter: OpenAI (ChatOpenAI) -> ILanguageModel.
All ChatOpenAI / langchain_openai details are confined here.
"""

from typing import Any, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from src.domain.ports.llm_port import ILanguageModel


class OpenAIChatAdapter(ILanguageModel):
    """Wraps ChatOpenAI and exposes the ILanguageModel interface."""

    MODEL_ID = "gpt-4"
    TEMPERATURE = 0.7
    MAX_TOKENS = 1000

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = MODEL_ID,
        callbacks: Optional[list[Any]] = None,
        _runnable: Any = None,
    ) -> None:
        """
        Args:
            api_key:   OpenAI API key.
            model:     Chat model name.
            callbacks: LangChain callbacks attached to every call (e.g. Langfuse).
            _runnable: Optional pre-configured chat model, used by tests in
                       place of ChatOpenAI.
        """
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatOpenAI(
                model=model,
                api_key=api_key,
                temperature=self.TEMPERATURE,
                max_tokens=self.MAX_TOKENS,
            )
        self._callbacks = callbacks or []

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        response = self._llm.invoke(
            [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)],
            config={"callbacks": self._callbacks},
        )
        content = response.content
        return content if isinstance(content, str) else str(content)
