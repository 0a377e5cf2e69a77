"""OpenAI provider implementation."""

import os
from typing import Iterator, Optional

from contracts import EmptyResponseError, MissingCredentialsError

from .base import LLMProvider, LLMResponse, require_content


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI chat models."""

    MODELS = {
        "gpt-4o": "gpt-4o",
        "gpt-4o-mini": "gpt-4o-mini",
        "gpt-4.1": "gpt-4.1",
        "gpt-4.1-mini": "gpt-4.1-mini",
        "mini": "gpt-4o-mini",
    }

    def __init__(self, api_key: Optional[str] = None):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key. Uses settings / OPENAI_API_KEY env var if not provided.
        """
        if api_key is None:
            from config import settings
            api_key = settings.openai_api_key or os.environ.get("OPENAI_API_KEY")
        self.api_key = api_key
        self._client = None

    @property
    def name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return "gpt-4o-mini"

    def _get_client(self):
        if not self.api_key:
            raise MissingCredentialsError(
                "Missing OPENAI_API_KEY. Set it in your environment or .env file."
            )
        if self._client is None:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def _resolve_model(self, model: Optional[str]) -> str:
        if model is None:
            return self.default_model
        return self.MODELS.get(model, model)

    @staticmethod
    def _messages(system_prompt: str, user_message: str) -> list:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]

    def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> LLMResponse:
        client = self._get_client()
        resolved_model = self._resolve_model(model)

        response = client.chat.completions.create(
            model=resolved_model,
            temperature=temperature,
            messages=self._messages(system_prompt, user_message),
        )

        content = response.choices[0].message.content if response.choices else None
        usage = response.usage
        return LLMResponse(
            content=require_content(content),
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            model=resolved_model,
            provider=self.name,
        )

    def stream(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> Iterator[str]:
        client = self._get_client()
        resolved_model = self._resolve_model(model)

        chunks = client.chat.completions.create(
            model=resolved_model,
            temperature=temperature,
            messages=self._messages(system_prompt, user_message),
            stream=True,
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
        return bool(self.api_key)
