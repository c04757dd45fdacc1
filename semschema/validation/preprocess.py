"""Schema rewrite applied before compilation: ``format`` implies a string."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

COMPOSITION_KEYWORDS = ("oneOf", "anyOf", "allOf")


def preprocess_schema(schema: Any) -> Any:
    """Return a deep copy of ``schema`` with ``type: "string"`` made explicit.

    Every subschema that declares ``format`` without ``type`` gets the string
    type. Recurses into ``properties``, a single-schema ``items`` and the
    ``oneOf``/``anyOf``/``allOf`` branches. Boolean schemas and other non-object
    values come back unchanged, and the input is never mutated.
    """
    if not isinstance(schema, dict):
        return schema
    processed = deepcopy(schema)
    _infer_string_types(processed)
    return processed


def _infer_string_types(schema: dict[str, Any]) -> None:
    if schema.get("format") and not schema.get("type"):
        schema["type"] = "string"

    properties = schema.get("properties")
    if isinstance(properties, dict):
        for subschema in properties.values():
            if isinstance(subschema, dict):
                _infer_string_types(subschema)

    items = schema.get("items")
    if isinstance(items, dict):
        _infer_string_types(items)

    for keyword in COMPOSITION_KEYWORDS:
        branches = schema.get(keyword)
        if isinstance(branches, list):
            for branch in branches:
                if isinstance(branch, dict):
                    _infer_string_types(branch)
