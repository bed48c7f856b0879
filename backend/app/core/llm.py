import logging
from typing import Any, Callable, List, Sequence

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from .config import Settings
from .exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


def get_llm(
    model: str,
    api_key: str,
    temperature: float = 0.0,
    timeout: float | None = None,
):
    """
    Factory function to create an LLM instance.
    Centralized so routes / workflows never create models directly.
    """
    return ChatGoogleGenerativeAI(
        model=model,
        temperature=temperature,
        google_api_key=api_key,
        timeout=timeout,
        max_retries=0,
    )


def completion_text(content: Any) -> str:
    """Plain text of a chat message whose content is a string or a list of blocks."""
    if isinstance(content, str):
        return content
    chunks: List[str] = []
    for block in content or []:
        if isinstance(block, str):
            chunks.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            chunks.append(block.get("text", ""))
    return "".join(chunks)


class GeminiGateway:
    """
    Single-turn, non-streaming call to the configured Gemini model.
    No retries; one upstream request per call to generate().
    """

    def __init__(self, settings: Settings, llm_factory: Callable[..., Any] = get_llm):
        self.settings = settings
        self._llm_factory = llm_factory

    @property
    def model_name(self) -> str:
        return self.settings.gemini_model

    def generate(self, parts: Sequence[Any]) -> str:
        if not self.settings.has_api_key:
            raise ConfigurationError("Server missing GEMINI_API_KEY")

        llm = self._llm_factory(
            model=self.model_name,
            api_key=self.settings.gemini_api_key,
            temperature=self.settings.ai_temperature,
            timeout=self.settings.ai_timeout_seconds,
        )
        message = HumanMessage(content=[part.to_content_block() for part in parts])

        logger.info(f"[LLM] Calling {self.model_name} with {len(parts)} parts")
        try:
            response = llm.invoke([message])
        except Exception as e:
            logger.warning(f"[LLM] {self.model_name} call failed: {e}")
            raise UpstreamError("AI provider request failed", details=str(e)) from e

        return completion_text(response.content)
