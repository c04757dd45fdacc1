"""Form control selection for schema properties.

The form UI renders one control per property. The discriminant is the
property's ``format``; without one, an ``enum`` gets a select control, and
otherwise the ``type`` is used. Anything unrecognised falls back to a plain
text input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Control(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date-time"
    DURATION = "duration"
    EMAIL = "email"
    IDN_EMAIL = "idn-email"
    HOSTNAME = "hostname"
    IDN_HOSTNAME = "idn-hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    URI_TEMPLATE = "uri-template"
    IRI = "iri"
    IRI_REFERENCE = "iri-reference"
    UUID = "uuid"
    JSON_POINTER = "json-pointer"
    RELATIVE_JSON_POINTER = "relative-json-pointer"
    REGEX = "regex"
    JSON = "json"
    HTML = "html"


_CONTROLS: dict[str, Control] = {
    "date-time": Control.DATE_TIME,
    "time": Control.TIME,
    "date": Control.DATE,
    "duration": Control.DURATION,
    "email": Control.EMAIL,
    "idn-email": Control.IDN_EMAIL,
    "hostname": Control.HOSTNAME,
    "idn-hostname": Control.IDN_HOSTNAME,
    "ipv4": Control.IPV4,
    "ipv6": Control.IPV6,
    "uri": Control.URI,
    "uri-reference": Control.URI_REFERENCE,
    "iri": Control.IRI,
    "iri-reference": Control.IRI_REFERENCE,
    "uri-template": Control.URI_TEMPLATE,
    "uuid": Control.UUID,
    "json-pointer": Control.JSON_POINTER,
    "relative-json-pointer": Control.RELATIVE_JSON_POINTER,
    "regex": Control.REGEX,
    # custom formats
    "text": Control.TEXTAREA,
    "json": Control.JSON,
    "html": Control.HTML,
    "enum": Control.ENUM,
    # type fallbacks
    "boolean": Control.BOOLEAN,
    "integer": Control.NUMBER,
    "number": Control.NUMBER,
    "string": Control.TEXT,
}


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    control: Control
    label: str
    description: str | None
    required: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "control": self.control.value,
            "label": self.label,
            "description": self.description,
            "required": self.required,
        }


def control_key(property_schema: dict[str, Any]) -> str | None:
    fmt = property_schema.get("format")
    if fmt:
        return fmt
    if isinstance(property_schema.get("enum"), list):
        return "enum"
    declared = property_schema.get("type")
    return declared if isinstance(declared, str) else None


def select_control(property_schema: dict[str, Any]) -> Control:
    return _CONTROLS.get(control_key(property_schema) or "", Control.TEXT)


def is_field_required(schema: dict[str, Any], name: str) -> bool:
    """True when the parent lists ``name`` or the property says ``required: true``."""
    required = schema.get("required")
    if isinstance(required, list) and name in required:
        return True
    property_schema = (schema.get("properties") or {}).get(name)
    return isinstance(property_schema, dict) and property_schema.get("required") is True


def describe_form(schema: dict[str, Any]) -> list[FieldDescriptor]:
    properties = schema.get("properties") or {}
    fields = []
    for name, property_schema in properties.items():
        if not isinstance(property_schema, dict):
            continue
        fields.append(
            FieldDescriptor(
                name=name,
                control=select_control(property_schema),
                label=property_schema.get("title") or name,
                description=property_schema.get("description"),
                required=is_field_required(schema, name),
            )
        )
    return fields


def default_values(schema: dict[str, Any]) -> dict[str, Any]:
    """Initial form value: declared defaults, otherwise an empty value per type."""
    defaults: dict[str, Any] = {}
    for name, property_schema in (schema.get("properties") or {}).items():
        if not isinstance(property_schema, dict):
            continue
        if "default" in property_schema:
            defaults[name] = property_schema["default"]
            continue
        declared = property_schema.get("type") or ("string" if property_schema.get("format") else None)
        if declared == "boolean":
            defaults[name] = False
        elif declared in ("number", "integer"):
            defaults[name] = None
        elif declared == "string":
            defaults[name] = ""
        elif declared == "array":
            defaults[name] = []
        elif declared == "object":
            defaults[name] = {}
    return defaults
