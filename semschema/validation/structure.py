"""Structural checks of schema documents against the SemSchema vocabulary.

The compiler only reports the first problem it trips over and knows nothing
about the UI annotations (``table``, ``grid``); these checks walk the whole
document and collect every problem in one pass so that an author can fix them
together.
"""

from __future__ import annotations

from typing import Any

from ..formats import KNOWN_FORMATS
from ..keywords import MAX_PRECISION, MIN_PRECISION, is_valid_precision
from .errors import SchemaIssue

VALID_TYPES = ("string", "number", "integer", "boolean", "object", "array", "null")

TABLE_STRING_PROPERTIES = (
    "table_name",
    "singular",
    "plural",
    "singular_label",
    "plural_label",
    "icon_url",
    "description",
)

VALID_SORT_ORDERS = ("asc", "desc")

_SUBSCHEMA_KEYWORDS = ("items", "not", "if", "then", "else")
_COMPOSITION_KEYWORDS = ("oneOf", "anyOf", "allOf")


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def check_schema_structure(schema: Any, path: str = "#") -> list[SchemaIssue]:
    """Return every structural problem found in ``schema`` (empty when clean)."""
    if not isinstance(schema, dict):
        return []

    issues: list[SchemaIssue] = []
    issues.extend(_check_format(schema, path))
    issues.extend(_check_type(schema, path))
    issues.extend(_check_precision(schema, path))
    issues.extend(_check_required(schema, path))
    issues.extend(_check_table(schema, path))
    issues.extend(_check_grid(schema, path))

    properties = schema.get("properties")
    if isinstance(properties, dict):
        issues.extend(_check_properties_type(schema, path))
        for name, subschema in properties.items():
            issues.extend(check_schema_structure(subschema, f"{path}/properties/{name}"))

    for keyword in _SUBSCHEMA_KEYWORDS:
        issues.extend(check_schema_structure(schema.get(keyword), f"{path}/{keyword}"))

    for keyword in _COMPOSITION_KEYWORDS:
        branches = schema.get(keyword)
        if isinstance(branches, list):
            for index, branch in enumerate(branches):
                issues.extend(check_schema_structure(branch, f"{path}/{keyword}/{index}"))

    return issues


def _check_format(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    if "format" not in schema:
        return []
    fmt = schema["format"]
    if not isinstance(fmt, str):
        return [
            SchemaIssue(
                path,
                f"Invalid format value. Must be a string, got {json_type_name(fmt)}",
                "format",
                fmt,
            )
        ]
    if fmt not in KNOWN_FORMATS:
        return [SchemaIssue(path, f'Unknown format "{fmt}"', "format", fmt)]
    return []


def _check_type(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    if "type" not in schema:
        return []
    declared = schema["type"]
    issues = []
    for value in declared if isinstance(declared, list) else [declared]:
        if not isinstance(value, str):
            message = f"Invalid type value. Type must be a string, got {json_type_name(value)}"
        elif value not in VALID_TYPES:
            message = f'Invalid type "{value}". Must be one of: {", ".join(VALID_TYPES)}'
        else:
            continue
        issues.append(SchemaIssue(path, message, "type", value))
    return issues


def _check_precision(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    if "precision" not in schema or is_valid_precision(schema["precision"]):
        return []
    value = schema["precision"]
    return [
        SchemaIssue(
            path,
            f'Invalid precision value "{value}". '
            f"Must be an integer between {MIN_PRECISION} and {MAX_PRECISION}",
            "precision",
            value,
        )
    ]


def _check_required(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    if "required" not in schema:
        return []
    required = schema["required"]
    if isinstance(required, bool):
        return []
    if not isinstance(required, list):
        return [
            SchemaIssue(
                path,
                "Invalid required value. Must be an array of property names or a boolean, "
                f"got {json_type_name(required)}",
                "required",
                required,
            )
        ]
    return [
        SchemaIssue(
            path,
            f"Invalid required array item at index {index}. "
            f"Must be a string, got {json_type_name(item)}",
            "required",
            item,
        )
        for index, item in enumerate(required)
        if not isinstance(item, str)
    ]


def _check_properties_type(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    declared = schema.get("type")
    if not declared:
        return []
    types = declared if isinstance(declared, list) else [declared]
    if "object" in types:
        return []
    shown = "|".join(map(str, types))
    return [
        SchemaIssue(
            path,
            f'Schema has "properties" keyword but type is "{shown}". '
            'When "properties" is present, type must be "object" or not specified',
            "properties",
            schema["properties"],
        )
    ]


def _check_table(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    if "table" not in schema:
        return []
    table = schema["table"]
    if not isinstance(table, dict):
        return [SchemaIssue(path, "Invalid table value. Must be an object", "table", table)]
    return [
        SchemaIssue(
            path,
            f"Invalid table.{name} value. Must be a string, got {json_type_name(table[name])}",
            "table",
            table[name],
        )
        for name in TABLE_STRING_PROPERTIES
        if name in table and not isinstance(table[name], str)
    ]


def _check_grid(schema: dict[str, Any], path: str) -> list[SchemaIssue]:
    if "grid" not in schema:
        return []
    grid = schema["grid"]
    if not isinstance(grid, dict):
        return [SchemaIssue(path, "Invalid grid value. Must be an object", "grid", grid)]

    issues = []
    sort_field = grid.get("sortField")
    if "sortField" in grid and not isinstance(sort_field, str):
        issues.append(
            SchemaIssue(
                path,
                f"Invalid grid.sortField value. Must be a string, got {json_type_name(sort_field)}",
                "grid",
                sort_field,
            )
        )
    if "sortOrder" in grid:
        sort_order = grid["sortOrder"]
        if not isinstance(sort_order, str):
            issues.append(
                SchemaIssue(
                    path,
                    f"Invalid grid.sortOrder value. Must be a string, got {json_type_name(sort_order)}",
                    "grid",
                    sort_order,
                )
            )
        elif sort_order not in VALID_SORT_ORDERS:
            issues.append(
                SchemaIssue(
                    path,
                    f'Invalid grid.sortOrder value "{sort_order}". '
                    f"Must be one of: {', '.join(VALID_SORT_ORDERS)}",
                    "grid",
                    sort_order,
                )
            )
    return issues
