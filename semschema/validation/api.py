"""Public entry points: check a schema, validate data against a schema."""

from __future__ import annotations

import logging
from typing import Any

from .errors import (
    InvalidSchemaError,
    SchemaCheckResult,
    SchemaCompileError,
    SchemaIssue,
    ValidationResult,
    normalize_error,
)
from .preprocess import preprocess_schema
from .structure import check_schema_structure
from .validator import compile_schema

logger = logging.getLogger(__name__)


def validate_schema(schema: Any, *, strict: bool = False) -> SchemaCheckResult:
    """Check that ``schema`` is a well-formed SemSchema document.

    All structural problems are collected and reported together. Only when
    there are none is the schema compiled; a compile failure is then reported
    on its own with the compiler's message.
    """
    processed = preprocess_schema(schema)
    issues = check_schema_structure(processed)
    if issues:
        logger.debug("schema has %d structural issue(s)", len(issues))
        return SchemaCheckResult(valid=False, errors=issues)
    try:
        compile_schema(processed, strict=strict)
    except SchemaCompileError as exc:
        return SchemaCheckResult(valid=False, errors=[SchemaIssue("#", str(exc), "schema")])
    return SchemaCheckResult(valid=True)


def assert_valid_schema(schema: Any, *, strict: bool = False) -> None:
    result = validate_schema(schema, strict=strict)
    if not result.valid:
        raise InvalidSchemaError(result.message or "unknown error")


def validate_data(data: Any, schema: Any, *, strict: bool = False) -> ValidationResult:
    """Validate ``data`` against ``schema`` and collect every violation.

    Raises ``InvalidSchemaError`` when the schema cannot be compiled; that is
    never reported as invalid data.
    """
    processed = preprocess_schema(schema)
    try:
        validator = compile_schema(processed, strict=strict)
    except SchemaCompileError as exc:
        raise InvalidSchemaError(str(exc)) from exc

    issues = [
        normalize_error(error)
        for error in validator.iter_errors(data)
        if not _is_empty_field_format_error(error, data, processed)
    ]
    result = ValidationResult.from_issues(issues)
    logger.debug("validation finished: valid=%s errors=%d", result.valid, len(issues))
    return result


def _is_empty_field_format_error(error: Any, data: Any, schema: Any) -> bool:
    # Only empty top-level properties of an object instance are exempt.
    if error.validator != "format" or len(error.absolute_path) != 1:
        return False
    if not isinstance(data, dict) or not isinstance(schema, dict):
        return False
    if not isinstance(schema.get("properties"), dict):
        return False
    return data.get(error.absolute_path[0]) == ""
