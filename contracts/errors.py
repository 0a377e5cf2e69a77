"""Exception types raised across the brief pipeline."""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import BriefFieldError


class BriefFactoryError(RuntimeError):
    """Base class for all pipeline failures the CLI reports and exits on."""


class MissingCredentialsError(BriefFactoryError):
    """A required API key or datastore credential is not configured."""


class EmptyResponseError(BriefFactoryError):
    """The LLM returned a response without any content."""


class BriefValidationError(BriefFactoryError):
    """A brief failed schema validation."""

    def __init__(self, errors: List["BriefFieldError"]):
        self.errors = errors
        details = "; ".join(e.describe() for e in errors)
        super().__init__(f"Invalid brief: {details}")


class StorageError(BriefFactoryError):
    """A datastore insert failed."""
