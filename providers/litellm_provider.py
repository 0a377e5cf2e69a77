"""LiteLLM-backed provider for models outside the OpenAI SDK."""

import os
from typing import Iterator, Optional

from contracts import EmptyResponseError, MissingCredentialsError

from .base import LLMProvider, LLMResponse, require_content


# LiteLLM model strings: provider/model-name (OpenAI can omit prefix)
DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "anthropic/claude-3-5-haiku-20241022",
    "gemini": "gemini/gemini-2.0-flash",
    "deepseek": "deepseek/deepseek-chat",
}

MODEL_ALIASES = {
    "openai": {
        None: "gpt-4o-mini",
        "gpt-4o": "gpt-4o",
        "gpt-4o-mini": "gpt-4o-mini",
    },
    "anthropic": {
        None: "anthropic/claude-3-5-haiku-20241022",
        "claude-haiku": "anthropic/claude-3-5-haiku-20241022",
        "claude-sonnet": "anthropic/claude-sonnet-4-20250514",
    },
    "gemini": {
        None: "gemini/gemini-2.0-flash",
        "gemini-2.0-flash": "gemini/gemini-2.0-flash",
        "gemini-2.5-flash": "gemini/gemini-2.5-flash",
    },
    "deepseek": {
        None: "deepseek/deepseek-chat",
        "deepseek-chat": "deepseek/deepseek-chat",
    },
}

# Map model prefix -> env var that must be set
_PROVIDER_KEY_MAP = {
    "gpt-": "OPENAI_API_KEY",
    "openai/": "OPENAI_API_KEY",
    "anthropic/": "ANTHROPIC_API_KEY",
    "gemini/": "GOOGLE_API_KEY",
    "deepseek/": "DEEPSEEK_API_KEY",
}


def _to_litellm_model(provider_name: Optional[str], model: Optional[str]) -> str:
    """Map provider + model to LiteLLM model string."""
    if provider_name:
        key = provider_name.lower()
        if key in MODEL_ALIASES:
            aliases = MODEL_ALIASES[key]
            if model:
                if model.lower() in aliases:
                    return aliases[model.lower()]
                if key == "openai" or "/" in model:
                    return model
                return f"{key}/{model}"
            return aliases[None]
    if model:
        model_lower = model.lower()
        for aliases in MODEL_ALIASES.values():
            if model_lower in aliases:
                return aliases[model_lower]
        return model
    return DEFAULT_MODELS["openai"]


def _required_key(model_string: str) -> Optional[str]:
    """Env var holding the API key for this model, if known."""
    for prefix, env_var in _PROVIDER_KEY_MAP.items():
        if model_string.startswith(prefix):
            return env_var
    return None


class LiteLLMProvider(LLMProvider):
    """Single provider that delegates to litellm.completion()."""

    def __init__(self, default_model: str):
        """Initialize with the LiteLLM model string to use by default.

        Args:
            default_model: LiteLLM model string (e.g. gpt-4o-mini, gemini/gemini-2.0-flash).
        """
        self._default_model = default_model

    @property
    def name(self) -> str:
        return "litellm"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _check_credentials(self, model: str) -> None:
        env_var = _required_key(model)
        if env_var and not os.environ.get(env_var, "").strip():
            raise MissingCredentialsError(
                f"Missing {env_var} for model {model}. Set it in your environment or .env file."
            )

    def _kwargs(self, system_prompt: str, user_message: str, model: str, temperature: float) -> dict:
        return {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "temperature": temperature,
        }

    def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> LLMResponse:
        import litellm

        resolved_model = model or self._default_model
        self._check_credentials(resolved_model)
        response = litellm.completion(
            **self._kwargs(system_prompt, user_message, resolved_model, temperature)
        )

        content = response.choices[0].message.content
        usage = getattr(response, "usage", None)
        input_tokens = getattr(usage, "prompt_tokens", 0) or 0
        output_tokens = getattr(usage, "completion_tokens", 0) or 0
        hidden = getattr(response, "_hidden_params", None) or {}
        cost = float(hidden.get("response_cost", 0) or 0)
        model_id = getattr(response, "model", None) or resolved_model

        return LLMResponse(
            content=require_content(content),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=model_id,
            provider=self.name,
            cost=cost,
        )

    def stream(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> Iterator[str]:
        import litellm

        resolved_model = model or self._default_model
        self._check_credentials(resolved_model)
        chunks = litellm.completion(
            stream=True,
            **self._kwargs(system_prompt, user_message, resolved_model, temperature),
        )

        received = False
        for chunk in chunks:
            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta.content
            if delta:
                received = True
                yield delta
        if not received:
            raise EmptyResponseError("No content received from the LLM stream.")

    def is_available(self) -> bool:
        """Available when a model is set and its provider key (if known) is present."""
        if not self._default_model:
            return False
        env_var = _required_key(self._default_model)
        return env_var is None or bool(os.environ.get(env_var, "").strip())
