"""Single-field validation used by the form UI on blur."""

from __future__ import annotations

from typing import Any

from ..validation.api import validate_data
from ..validation.errors import json_pointer


def build_field_schema(field_schema: Any, field_name: str, *, required: bool) -> dict[str, Any]:
    wrapper: dict[str, Any] = {"type": "object", "properties": {field_name: field_schema}}
    if required:
        wrapper["required"] = [field_name]
    return wrapper


def validate_field(
    value: Any,
    field_schema: Any,
    field_name: str,
    parent_schema: dict[str, Any] | None = None,
    *,
    strict: bool = False,
) -> str | None:
    """Return the first error message for one field, or ``None`` when it passes.

    The field is validated as the only property of a synthetic object schema so
    that its error paths match those of a full-document validation. Optional
    fields left empty are not validated.
    """
    in_parent_required = bool(parent_schema) and field_name in _listed_required(parent_schema)
    property_required = isinstance(field_schema, dict) and field_schema.get("required") is True
    if not (in_parent_required or property_required) and value in (None, ""):
        return None

    wrapper = build_field_schema(field_schema, field_name, required=in_parent_required)
    result = validate_data({field_name: value}, wrapper, strict=strict)
    if result.valid:
        return None
    field_path = json_pointer([field_name])
    for issue in result.errors or ():
        if issue.instance_path in (field_path, ""):
            return issue.message
    return None


def validate_form_field(value: Any, schema: dict[str, Any], field_name: str, *, strict: bool = False) -> str | None:
    """Validate ``field_name`` using its property schema inside ``schema``."""
    properties = schema.get("properties")
    if not isinstance(properties, dict) or field_name not in properties:
        raise ValueError(f"unknown field {field_name}")
    return validate_field(value, properties[field_name], field_name, schema, strict=strict)


def _listed_required(schema: dict[str, Any]) -> list[str]:
    required = schema.get("required")
    return required if isinstance(required, list) else []
