"""Factory for creating LLM providers."""

from typing import Dict, Optional

from config import settings

from .base import LLMProvider
from .litellm_provider import LiteLLMProvider, _to_litellm_model
from .openai_provider import OpenAIProvider


PROVIDER_NAMES = ("openai", "litellm", "anthropic", "gemini", "deepseek")


def get_provider(
    provider_name: Optional[str] = None,
    model: Optional[str] = None,
) -> LLMProvider:
    """Get an LLM provider instance.

    Args:
        provider_name: openai (native SDK), litellm, or a provider LiteLLM routes to
            (anthropic, gemini, deepseek)
        model: Model name; a "vendor/model" string without a provider selects LiteLLM

    Returns:
        LLMProvider instance

    Examples:
        get_provider()                                # OpenAI, gpt-4o-mini
        get_provider("openai", "gpt-4o")
        get_provider("gemini")                        # LiteLLM, gemini/gemini-2.0-flash
        get_provider(model="anthropic/claude-sonnet-4-20250514")
    """
    if provider_name:
        provider_key = provider_name.lower()
        if provider_key not in PROVIDER_NAMES:
            raise ValueError(
                f"Unknown provider: {provider_name}. "
                f"Available: {list(PROVIDER_NAMES)}"
            )
        if provider_key == "openai":
            return OpenAIProvider()
        if provider_key == "litellm":
            return LiteLLMProvider(default_model=_to_litellm_model(None, model))
        return LiteLLMProvider(default_model=_to_litellm_model(provider_key, model))

    if model and "/" in model:
        return LiteLLMProvider(default_model=model)

    default_key = settings.default_provider.lower()
    if default_key and default_key != "openai":
        return get_provider(default_key, model)
    return OpenAIProvider()


def list_providers() -> Dict[str, bool]:
    """List providers and whether their credentials are configured."""
    result = {"openai": OpenAIProvider().is_available()}
    for name in ("anthropic", "gemini", "deepseek"):
        result[name] = LiteLLMProvider(default_model=_to_litellm_model(name, None)).is_available()
    return result
