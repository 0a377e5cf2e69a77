"""Pydantic contracts for Brief Factory.

Everything the LLM produces is validated through these models before it is
embedded or stored.
"""

from .brief_contracts import (
    Level,
    TechFocus,
    CompanySize,
    Complexity,
    StoryPriority,
    UserStory,
    ProjectBrief,
)

from .request_contracts import GenerationRequest

from .validation import (
    BriefFieldError,
    BriefParseResult,
    BatchValidationReport,
    safe_parse_brief,
    parse_brief,
    parse_briefs,
    validate_batch,
    extract_json,
)

from .errors import (
    BriefFactoryError,
    MissingCredentialsError,
    EmptyResponseError,
    BriefValidationError,
    StorageError,
)

__all__ = [
    # Brief
    "Level",
    "TechFocus",
    "CompanySize",
    "Complexity",
    "StoryPriority",
    "UserStory",
    "ProjectBrief",
    # Request
    "GenerationRequest",
    # Validation
    "BriefFieldError",
    "BriefParseResult",
    "BatchValidationReport",
    "safe_parse_brief",
    "parse_brief",
    "parse_briefs",
    "validate_batch",
    "extract_json",
    # Errors
    "BriefFactoryError",
    "MissingCredentialsError",
    "EmptyResponseError",
    "BriefValidationError",
    "StorageError",
]
