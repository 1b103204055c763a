"""
Pydantic schemas for devotional entries.

``DevotionalCreate`` and ``DevotionalUpdate`` describe request bodies,
``DevotionalRead`` and ``DevotionalCreated`` describe responses.  Request
bodies are not bound by FastAPI directly: endpoints pass the decoded JSON
to ``validate_create`` / ``validate_update``, which return a
``ValidationResult`` that either carries the parsed model or the list of
reasons the body was rejected.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError, model_validator

T = TypeVar("T")


class DevotionalCreate(BaseModel):
    """Schema for creating a devotional."""

    verse: str = Field(..., min_length=1, examples=["John 3:16"])
    content: str = Field(..., min_length=1, examples=["For God so loved the world..."])


class DevotionalUpdate(BaseModel):
    """Schema for a partial update.

    Both fields are optional but at least one must be supplied, and a
    supplied field may not be empty.
    """

    verse: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def require_one_field(self) -> "DevotionalUpdate":
        if self.verse is None and self.content is None:
            raise ValueError("At least one of verse or content is required")
        return self

    def changes(self) -> dict:
        """Return only the fields that were supplied."""
        return self.model_dump(exclude_none=True)


class DevotionalRead(BaseModel):
    """Schema for reading a devotional."""

    id: int
    verse: str
    content: str
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class DevotionalCreated(BaseModel):
    message: str
    id: int


@dataclass
class ValidationResult(Generic[T]):
    """Outcome of validating a request body.

    ``ok`` is ``True`` and ``value`` holds the parsed model on success;
    otherwise ``errors`` lists human readable reasons.
    """

    ok: bool
    value: Optional[T] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, errors: List[str]) -> "ValidationResult[T]":
        return cls(ok=False, errors=errors)


def _reasons(exc: ValidationError) -> List[str]:
    reasons = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        reasons.append(f"{location}: {message}" if location else message)
    return reasons


def _validate(model: type, body: Any) -> ValidationResult:
    if not isinstance(body, dict):
        return ValidationResult.failure(["Request body must be a JSON object"])
    try:
        return ValidationResult.success(model.model_validate(body))
    except ValidationError as exc:
        return ValidationResult.failure(_reasons(exc))


def validate_create(body: Any) -> ValidationResult[DevotionalCreate]:
    return _validate(DevotionalCreate, body)


def validate_update(body: Any) -> ValidationResult[DevotionalUpdate]:
    return _validate(DevotionalUpdate, body)
