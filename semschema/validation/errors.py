"""Result types, exceptions and error-shape normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from jsonschema import ValidationError

from ..keywords import KeywordViolation


class SemSchemaError(ValueError):
    """Base class for schema problems surfaced to callers."""


class SchemaCompileError(SemSchemaError):
    """Raised when a schema cannot be turned into a validator."""


class InvalidSchemaError(SemSchemaError):
    """Raised by the public API when a schema is unusable."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid schema: {detail}")
        self.detail = detail


@dataclass(frozen=True)
class ValidationIssue:
    keyword: str
    message: str
    instance_path: str
    schema_path: str
    params: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "keyword": self.keyword,
            "message": self.message,
            "instancePath": self.instance_path,
            "schemaPath": self.schema_path,
            "params": dict(self.params),
        }


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[ValidationIssue] | None = None

    def __post_init__(self) -> None:
        if self.valid != (self.errors is None):
            raise ValueError("errors must be None exactly when the result is valid")
        if self.errors is not None and not self.errors:
            raise ValueError("an invalid result needs at least one error")

    @classmethod
    def from_issues(cls, issues: Iterable[ValidationIssue]) -> "ValidationResult":
        collected = list(issues)
        if not collected:
            return cls(valid=True, errors=None)
        return cls(valid=False, errors=collected)

    def as_dict(self) -> dict[str, Any]:
        errors = None if self.errors is None else [issue.as_dict() for issue in self.errors]
        return {"valid": self.valid, "errors": errors}


@dataclass(frozen=True)
class SchemaIssue:
    """A structural problem found in a schema document."""

    path: str
    message: str
    keyword: str | None = None
    value: Any = None

    def describe(self) -> str:
        return f"{self.message} at {self.path}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "keyword": self.keyword,
            "message": self.message,
            "schemaPath": self.path,
            "value": self.value,
        }


@dataclass(frozen=True)
class SchemaCheckResult:
    valid: bool
    errors: list[SchemaIssue] | None = None

    @property
    def message(self) -> str | None:
        if not self.errors:
            return None
        return "; ".join(issue.describe() for issue in self.errors)

    def as_dict(self) -> dict[str, Any]:
        errors = None if self.errors is None else [issue.as_dict() for issue in self.errors]
        return {"valid": self.valid, "errors": errors, "message": self.message}


FALSE_SCHEMA_KEYWORD = "false schema"


def json_pointer(parts: Iterable[Any]) -> str:
    """Build an RFC 6901 pointer (``""`` for the document root)."""
    tokens = (str(part).replace("~", "~0").replace("/", "~1") for part in parts)
    return "".join(f"/{token}" for token in tokens)


def normalize_error(error: ValidationError) -> ValidationIssue:
    if error.validator is None:
        # A `false` subschema rejects every value.
        keyword = FALSE_SCHEMA_KEYWORD
        message, params = "boolean schema is false", {}
    elif isinstance(error, KeywordViolation):
        keyword = str(error.validator)
        message, params = error.message, error.params
    else:
        keyword = str(error.validator)
        message, params = _describe(keyword, error)
    return ValidationIssue(
        keyword=keyword,
        message=message,
        instance_path=json_pointer(error.absolute_path),
        schema_path="#" + json_pointer(error.absolute_schema_path),
        params=params,
    )


_COMPARISONS = {
    "minimum": ">=",
    "maximum": "<=",
    "exclusiveMinimum": ">",
    "exclusiveMaximum": "<",
}

_LIMIT_PHRASES = {
    "minLength": ("fewer", "characters"),
    "maxLength": ("more", "characters"),
    "minItems": ("fewer", "items"),
    "maxItems": ("more", "items"),
    "minProperties": ("fewer", "properties"),
    "maxProperties": ("more", "properties"),
}


def _describe(keyword: str, error: ValidationError) -> tuple[str, dict[str, Any]]:
    """Reshape a draft keyword failure into a short sentence plus params."""
    value = error.validator_value
    if keyword == "type":
        types = value if isinstance(value, list) else [value]
        return f"must be {','.join(map(str, types))}", {"type": value}
    if keyword == "format":
        return f'must match format "{value}"', {"format": value}
    if keyword in _COMPARISONS:
        comparison = _COMPARISONS[keyword]
        return f"must be {comparison} {value}", {"comparison": comparison, "limit": value}
    if keyword in _LIMIT_PHRASES:
        direction, unit = _LIMIT_PHRASES[keyword]
        return f"must NOT have {direction} than {value} {unit}", {"limit": value}
    if keyword == "pattern":
        return f'must match pattern "{value}"', {"pattern": value}
    if keyword == "enum":
        return "must be equal to one of the allowed values", {"allowedValues": value}
    if keyword == "const":
        return "must be equal to constant", {"allowedValue": value}
    if keyword == "multipleOf":
        return f"must be multiple of {value}", {"multipleOf": value}
    if keyword == "uniqueItems":
        return "must NOT have duplicate items", {}
    if keyword in ("additionalProperties", "unevaluatedProperties"):
        extras = _extra_properties(error)
        return "must NOT have additional properties", {"additionalProperty": extras[0] if extras else None}
    if keyword == "oneOf":
        return "must match exactly one schema in oneOf", {}
    if keyword == "anyOf":
        return "must match a schema in anyOf", {}
    if keyword == "not":
        return "must NOT be valid", {}
    return error.message, {}


def _extra_properties(error: ValidationError) -> list[str]:
    instance, schema = error.instance, error.schema
    if not isinstance(instance, dict) or not isinstance(schema, dict):
        return []
    declared = schema.get("properties") or {}
    return [name for name in instance if name not in declared]
