"""Validator factory wiring the SemSchema vocabulary into ``jsonschema``.

Every call builds a brand new validator class and format checker; nothing is
registered on ``jsonschema``'s module-level state, so two validators never
influence each other.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Iterator

from jsonschema import Draft202012Validator, FormatChecker
from jsonschema.exceptions import SchemaError
from jsonschema.validators import create

from ..formats import register_formats
from ..keywords import CUSTOM_KEYWORDS
from .errors import SchemaCompileError

logger = logging.getLogger(__name__)

# Keywords that never validate but are legitimate in a strict schema.
ANNOTATION_KEYWORDS = frozenset(
    {
        "$schema",
        "$id",
        "$anchor",
        "$dynamicAnchor",
        "$vocabulary",
        "$comment",
        "$defs",
        "definitions",
        "title",
        "description",
        "default",
        "deprecated",
        "readOnly",
        "writeOnly",
        "examples",
        "contentEncoding",
        "contentMediaType",
        "contentSchema",
    }
)

_SINGLE_SUBSCHEMA_KEYWORDS = (
    "additionalProperties",
    "unevaluatedProperties",
    "unevaluatedItems",
    "propertyNames",
    "contains",
    "not",
    "if",
    "then",
    "else",
)
_SUBSCHEMA_LIST_KEYWORDS = ("allOf", "anyOf", "oneOf", "prefixItems")
_SUBSCHEMA_MAP_KEYWORDS = ("properties", "patternProperties", "dependentSchemas", "$defs", "definitions")


def iter_subschemas(schema: Any, path: str = "#") -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(path, node)`` for ``schema`` and every object subschema in it."""
    if not isinstance(schema, dict):
        return
    yield path, schema
    for keyword in _SINGLE_SUBSCHEMA_KEYWORDS:
        yield from iter_subschemas(schema.get(keyword), f"{path}/{keyword}")
    items = schema.get("items")
    if isinstance(items, list):
        for index, item in enumerate(items):
            yield from iter_subschemas(item, f"{path}/items/{index}")
    else:
        yield from iter_subschemas(items, f"{path}/items")
    for keyword in _SUBSCHEMA_LIST_KEYWORDS:
        branches = schema.get(keyword)
        if isinstance(branches, list):
            for index, branch in enumerate(branches):
                yield from iter_subschemas(branch, f"{path}/{keyword}/{index}")
    for keyword in _SUBSCHEMA_MAP_KEYWORDS:
        mapping = schema.get(keyword)
        if isinstance(mapping, dict):
            for name, subschema in mapping.items():
                yield from iter_subschemas(subschema, f"{path}/{keyword}/{name}")


def _required_first(schema: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    # Object-level presence is reported before the checks of present properties.
    if "required" in schema:
        yield "required", schema["required"]
    for keyword, value in schema.items():
        if keyword != "required":
            yield keyword, value


def create_validator_class() -> type:
    """Return a new draft 2020-12 validator class carrying the custom keywords."""
    return create(
        meta_schema=Draft202012Validator.META_SCHEMA,
        validators={**Draft202012Validator.VALIDATORS, **CUSTOM_KEYWORDS},
        type_checker=Draft202012Validator.TYPE_CHECKER,
        format_checker=Draft202012Validator.FORMAT_CHECKER,
        id_of=Draft202012Validator.ID_OF,
        applicable_validators=_required_first,
    )


def create_format_checker(*, vocabulary: bool = True) -> FormatChecker:
    """Return a fresh checker with the standard formats (plus the custom ones)."""
    checker = FormatChecker()
    if vocabulary:
        register_formats(checker)
    return checker


def compile_schema(schema: Any, *, vocabulary: bool = True, strict: bool | None = None) -> Any:
    """Build a validator instance for ``schema`` or raise ``SchemaCompileError``.

    With ``vocabulary=False`` a plain draft 2020-12 validator is returned, and
    strict mode (unknown keywords and formats are errors) is on by default.
    With the vocabulary, strict mode is off unless asked for, so UI hints can
    sit next to validation keywords.
    """
    if strict is None:
        strict = not vocabulary

    if vocabulary:
        _check_vocabulary_values(schema)
        validator_class = create_validator_class()
        meta_view = _without_property_level_required(schema)
    else:
        validator_class = Draft202012Validator
        meta_view = schema
    format_checker = create_format_checker(vocabulary=vocabulary)

    try:
        Draft202012Validator.check_schema(meta_view)
    except SchemaError as exc:
        location = "#" + "".join(f"/{part}" for part in exc.absolute_path)
        logger.warning("schema rejected by meta-schema at %s: %s", location, exc.message)
        raise SchemaCompileError(f"schema is invalid: {exc.message} at {location}") from exc

    if strict:
        known = frozenset(validator_class.VALIDATORS) | ANNOTATION_KEYWORDS
        _check_strict(schema, known, format_checker)

    return validator_class(schema, format_checker=format_checker)


def _check_vocabulary_values(schema: Any) -> None:
    for path, node in iter_subschemas(schema):
        if "required" in node and not isinstance(node["required"], (bool, list)):
            raise SchemaCompileError(f'"required" value must be boolean or array at "{path}"')
        precision = node.get("precision")
        if "precision" in node and (isinstance(precision, bool) or not isinstance(precision, (int, float))):
            raise SchemaCompileError(f'"precision" value must be number at "{path}"')


def _without_property_level_required(schema: Any) -> Any:
    view = deepcopy(schema)
    for _, node in iter_subschemas(view):
        if isinstance(node.get("required"), bool):
            del node["required"]
    return view


def _check_strict(schema: Any, known_keywords: frozenset[str], format_checker: FormatChecker) -> None:
    for path, node in iter_subschemas(schema):
        for keyword in node:
            if keyword not in known_keywords:
                raise SchemaCompileError(f'strict mode: unknown keyword: "{keyword}" at "{path}"')
        fmt = node.get("format")
        if isinstance(fmt, str) and fmt not in format_checker.checkers:
            raise SchemaCompileError(f'unknown format "{fmt}" ignored in schema at path "{path}"')
