"""Safe-parse and batch validation of project briefs.

Two modes share the same schema:

- generation: ``parse_briefs`` aborts on the first invalid brief
- batch: ``validate_batch`` scans every brief and reports all failures
"""

import json
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .brief_contracts import ProjectBrief
from .errors import BriefValidationError

ROOT_FIELD = "<root>"


class BriefFieldError(BaseModel):
    """A single field-level validation failure."""

    index: Optional[int] = Field(None, description="Position of the brief in its batch")
    field: str = Field(..., description="Dotted path of the offending field")
    message: str
    error_type: str = Field(..., description="pydantic error type, e.g. 'missing'")

    def describe(self) -> str:
        prefix = f"brief #{self.index + 1} " if self.index is not None else ""
        return f"{prefix}{self.field}: {self.message}"


class BriefParseResult(BaseModel):
    """Outcome of safe-parsing one brief: either a brief or its errors."""

    brief: Optional[ProjectBrief] = None
    errors: List[BriefFieldError] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.brief is not None


class BatchValidationReport(BaseModel):
    """Per-brief results of validating a whole dataset."""

    valid: List[ProjectBrief] = Field(default_factory=list)
    invalid: List[BriefParseResult] = Field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return len(self.valid)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid)

    @property
    def total(self) -> int:
        return self.valid_count + self.invalid_count

    @property
    def errors(self) -> List[BriefFieldError]:
        return [error for result in self.invalid for error in result.errors]


def _field_errors(exc: ValidationError, index: Optional[int]) -> List[BriefFieldError]:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        errors.append(BriefFieldError(
            index=index,
            field=loc or ROOT_FIELD,
            message=err.get("msg", "invalid value"),
            error_type=err.get("type", "value_error"),
        ))
    return errors


def safe_parse_brief(data: Any, index: Optional[int] = None) -> BriefParseResult:
    """Validate one parsed JSON value without raising.

    Args:
        data: Any parsed JSON value
        index: Position in the enclosing batch, recorded on each error

    Returns:
        BriefParseResult holding either the typed brief or its field errors
    """
    try:
        brief = ProjectBrief.model_validate(data)
    except ValidationError as e:
        return BriefParseResult(errors=_field_errors(e, index))
    return BriefParseResult(brief=brief)


def parse_brief(data: Any, index: Optional[int] = None) -> ProjectBrief:
    """Validate one brief, raising BriefValidationError on failure."""
    result = safe_parse_brief(data, index=index)
    if not result.success:
        raise BriefValidationError(result.errors)
    return result.brief


def parse_briefs(data: Any) -> List[ProjectBrief]:
    """Validate a single brief or an array of briefs.

    Stops at the first invalid brief.
    """
    if isinstance(data, list):
        return [parse_brief(item, index=i) for i, item in enumerate(data)]
    return [parse_brief(data)]


def validate_batch(data: Any) -> BatchValidationReport:
    """Validate every brief in a dataset array, collecting all failures.

    Raises:
        ValueError: If the dataset is not an array
    """
    if not isinstance(data, list):
        raise ValueError("Dataset must be an array of briefs")

    report = BatchValidationReport()
    for i, item in enumerate(data):
        result = safe_parse_brief(item, index=i)
        if result.success:
            report.valid.append(result.brief)
        else:
            report.invalid.append(result)
    return report


def _strip_fence(text: str) -> str:
    for marker in ("```json", "```"):
        if marker in text:
            start = text.find(marker) + len(marker)
            end = text.find("```", start)
            if end == -1:
                end = len(text)
            return text[start:end].strip()
    return text


def extract_json(response_text: str) -> Any:
    """Parse JSON from LLM output, tolerating markdown code fences.

    Fences are only stripped when the raw text does not parse.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
    """
    text = response_text.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        stripped = _strip_fence(text)
        if stripped == text:
            raise
    return json.loads(stripped)
