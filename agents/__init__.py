"""Agent implementations for Brief Factory."""

from .brief_agent import BriefAgent, GenerationResult, TokenUsage
from .prompts import SYSTEM_PROMPT, build_system_prompt, build_user_prompt

__all__ = [
    "BriefAgent",
    "GenerationResult",
    "TokenUsage",
    "SYSTEM_PROMPT",
    "build_system_prompt",
    "build_user_prompt",
]
