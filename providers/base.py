"""Base LLM provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from contracts import EmptyResponseError


@dataclass
class LLMResponse:
    """Standardized response from any LLM provider."""
    content: str
    input_tokens: int
    output_tokens: int
    model: str
    provider: str
    cost: float = 0.0


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (openai, litellm)."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model for this provider."""
        pass

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> LLMResponse:
        """Generate a completion.

        Args:
            system_prompt: System/instruction prompt
            user_message: User message/query
            model: Model to use (defaults to provider's default)
            temperature: Sampling temperature

        Returns:
            LLMResponse with content and token counts

        Raises:
            MissingCredentialsError: If the provider has no API key
            EmptyResponseError: If the response carries no content
        """
        pass

    @abstractmethod
    def stream(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> Iterator[str]:
        """Yield text fragments as the model produces them."""
        pass

    def is_available(self) -> bool:
        """Check if this provider is available (API key set, etc.)."""
        return True


def require_content(content: Optional[str]) -> str:
    """Return content, raising EmptyResponseError if it is missing or blank."""
    if not content or not content.strip():
        raise EmptyResponseError("No content received from the LLM response.")
    return content
