"""LLM providers for brief generation.

OpenAIProvider talks to the OpenAI SDK directly; LiteLLMProvider routes
anthropic, gemini and deepseek models through litellm.
"""

from .base import LLMProvider, LLMResponse
from .factory import get_provider, list_providers

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "get_provider",
    "list_providers",
]
