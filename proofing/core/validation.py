"""Schema validation helpers built on pydantic.

A "schema" is anything pydantic can validate against: a ``BaseModel``
subclass, a ``TypeAdapter``, a plain or ``Annotated`` type, or one of the
composite schemas defined here. Validation failures surface as the
application's ``ValidationError`` (HTTP 422) with a field-path to message
list mapping.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import InitErrorDetails
from pydantic_core import PydanticCustomError

from proofing.core.errors.validation import ValidationError
from proofing.core.errors.validation import format_issue_path
from proofing.core.errors.validation import format_issues

T = TypeVar("T")


@lru_cache(maxsize=256)
def _cached_adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def _validator_for(schema: Any) -> Callable[[Any], Any]:
    if isinstance(schema, (TypeAdapter, CustomMessageSchema, ValidationPipeline)):
        return schema.validate_python
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema.model_validate

    try:
        adapter = _cached_adapter(schema)
    except TypeError:
        # unhashable schema objects skip the cache
        adapter = TypeAdapter(schema)
    return adapter.validate_python


def format_validation_error(error: PydanticValidationError) -> dict[str, list[str]]:
    """Group pydantic issues by dotted field path."""
    return format_issues(error.errors())


def validate(schema: Any, data: Any) -> Any:
    """Validate ``data`` and return the parsed value.

    Raises ``ValidationError`` when the schema rejects the input. Any other
    exception raised while validating propagates unchanged.
    """
    try:
        return _validator_for(schema)(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_issues(exc.errors()) from exc


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of ``safe_validate``: ``data`` when ``ok``, otherwise ``error``."""

    ok: bool
    data: T | None = None
    error: ValidationError | None = None


def safe_validate(schema: Any, data: Any) -> ValidationResult[Any]:
    """Like ``validate`` but returns a result instead of raising on bad input."""
    try:
        return ValidationResult(ok=True, data=_validator_for(schema)(data))
    except PydanticValidationError as exc:
        return ValidationResult(
            ok=False,
            error=ValidationError.from_issues(exc.errors()),
        )
    except ValidationError as exc:
        return ValidationResult(ok=False, error=exc)


def validate_query(schema: Any, query: Mapping[str, Any]) -> Any:
    """Validate parsed query-string parameters."""
    return validate(schema, query)


def validate_body(schema: Any, body: Any) -> Any:
    """Validate a decoded request body."""
    return validate(schema, body)


def validate_params(schema: Any, params: Mapping[str, Any]) -> Any:
    """Validate route path parameters."""
    return validate(schema, params)


class CustomMessageSchema:
    """Schema wrapper that rewrites failure messages.

    Each issue's message is looked up by dotted field path first, then by
    pydantic error type (``missing``, ``string_too_short`` ...), and falls
    back to pydantic's own message.
    """

    def __init__(self, schema: Any, messages: Mapping[str, str]) -> None:
        self.schema = schema
        self.messages = dict(messages)

    def _message_for(self, issue: Mapping[str, Any]) -> str:
        path = format_issue_path(issue.get("loc", ()))
        if path in self.messages:
            return self.messages[path]
        if issue.get("type") in self.messages:
            return self.messages[issue["type"]]
        return str(issue.get("msg", "Invalid value"))

    def validate_python(self, data: Any) -> Any:
        try:
            return _validator_for(self.schema)(data)
        except PydanticValidationError as exc:
            line_errors: list[InitErrorDetails] = [
                {
                    "type": PydanticCustomError(str(issue["type"]), self._message_for(issue)),
                    "loc": tuple(issue.get("loc", ())),
                    "input": issue.get("input"),
                }
                for issue in exc.errors()
            ]
            raise PydanticValidationError.from_exception_data(exc.title, line_errors) from exc


def with_custom_messages(schema: Any, messages: Mapping[str, str]) -> CustomMessageSchema:
    return CustomMessageSchema(schema, messages)


class ValidationPipeline:
    """Chain of schemas; each one validates the previous schema's output."""

    def __init__(self, *schemas: Any) -> None:
        if not schemas:
            raise ValueError("At least one schema is required")
        self.schemas = schemas

    def validate_python(self, data: Any) -> Any:
        value = data
        for index, schema in enumerate(self.schemas):
            if index and isinstance(value, BaseModel):
                value = value.model_dump(by_alias=True)
            value = _validator_for(schema)(value)
        return value


def create_validation_pipeline(*schemas: Any) -> ValidationPipeline:
    return ValidationPipeline(*schemas)
