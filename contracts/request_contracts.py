"""Generation request built from CLI flags."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import settings

from .brief_contracts import Level, TechFocus


class GenerationRequest(BaseModel):
    """What the user asked the generator for. Unset fields are left to the model."""

    model_config = ConfigDict(use_enum_values=True)

    domain: Optional[str] = None
    level: Optional[Level] = None
    tech_focus: Optional[TechFocus] = None
    stack: List[str] = Field(default_factory=list)
    duration: Optional[str] = None
    count: int = Field(default=1, ge=1)

    @field_validator("stack", mode="before")
    @classmethod
    def split_stack(cls, value):
        """Accept repeated flags as well as comma-separated values."""
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        items = []
        for entry in value:
            items.extend(part.strip() for part in str(entry).split(","))
        return [item for item in items if item]

    @field_validator("count")
    @classmethod
    def count_within_limit(cls, value: int) -> int:
        if value > settings.max_briefs_per_request:
            raise ValueError(
                f"count must be at most {settings.max_briefs_per_request}"
            )
        return value

    @field_validator("domain", "duration")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value
