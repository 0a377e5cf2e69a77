"""Brief Agent - generates project briefs through an LLM provider.

The agent:
- Builds the system and user prompts for a GenerationRequest
- Calls the LLM once (no retries)
- Parses the JSON payload and validates it against ProjectBrief
- Tracks token usage across calls
"""

from typing import Any, Iterator, List, Optional

from pydantic import BaseModel

from agents.prompts import build_system_prompt, build_user_prompt
from config import settings
from contracts import GenerationRequest, ProjectBrief, extract_json, parse_briefs
from providers import LLMProvider, LLMResponse, get_provider
from utils import get_logger

logger = get_logger(__name__)


class TokenUsage(BaseModel):
    """Token usage reported by the provider."""
    input_tokens: int = 0
    output_tokens: int = 0
    cost_usd: float = 0.0


class GenerationResult(BaseModel):
    """Result of one generation call: raw JSON plus validated briefs."""
    raw: Any
    briefs: List[ProjectBrief]
    token_usage: TokenUsage
    model: str
    provider: str


class BriefAgent:
    """Turns a GenerationRequest into validated ProjectBriefs."""

    def __init__(
        self,
        model: Optional[str] = None,
        provider: Optional[str] = None,
        llm_provider: Optional[LLMProvider] = None,
        temperature: Optional[float] = None,
    ):
        """Initialize the agent.

        Args:
            model: Override the default model (e.g. 'gpt-4o', 'gemini/gemini-2.0-flash')
            provider: Explicit provider name (openai, litellm, anthropic, gemini, deepseek)
            llm_provider: Pre-built provider, mainly for tests
            temperature: Sampling temperature (defaults to settings.temperature)
        """
        self.llm_provider: LLMProvider = llm_provider or get_provider(
            provider_name=provider, model=model
        )
        if self.llm_provider.name == "openai":
            self.model = model or settings.default_model
        else:
            self.model = self.llm_provider.default_model
        self.temperature = settings.temperature if temperature is None else temperature
        self.total_usage = TokenUsage()

    def _call(self, request: GenerationRequest) -> LLMResponse:
        logger.info("Requesting %d brief(s) from %s (%s)", request.count, self.llm_provider.name, self.model)
        response = self.llm_provider.complete(
            system_prompt=build_system_prompt(),
            user_message=build_user_prompt(request),
            model=self.model,
            temperature=self.temperature,
        )
        self.total_usage.input_tokens += response.input_tokens
        self.total_usage.output_tokens += response.output_tokens
        self.total_usage.cost_usd += response.cost
        return response

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate and validate briefs, aborting on the first invalid one.

        Raises:
            BriefValidationError: If any brief fails validation
        """
        response = self._call(request)
        raw = extract_json(response.content)
        briefs = parse_briefs(raw)
        logger.info("Validated %d brief(s)", len(briefs))

        return GenerationResult(
            raw=raw,
            briefs=briefs,
            token_usage=TokenUsage(
                input_tokens=response.input_tokens,
                output_tokens=response.output_tokens,
                cost_usd=response.cost,
            ),
            model=response.model,
            provider=response.provider,
        )

    def stream(self, request: GenerationRequest) -> Iterator[str]:
        """Yield the raw generated text as it arrives. No parsing or validation."""
        logger.info("Streaming %d brief(s) from %s (%s)", request.count, self.llm_provider.name, self.model)
        return self.llm_provider.stream(
            system_prompt=build_system_prompt(),
            user_message=build_user_prompt(request),
            model=self.model,
            temperature=self.temperature,
        )
