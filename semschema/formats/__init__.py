"""String formats added on top of the draft 2020-12 format vocabulary."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from jsonschema import FormatChecker

from .html import validate_html_format
from .idn import validate_idn_email_format, validate_idn_hostname_format
from .iri import validate_iri_format, validate_iri_reference_format
from .json import validate_json_format
from .text import validate_text_format

FormatPredicate = Callable[[str], bool]

CUSTOM_FORMATS: dict[str, FormatPredicate] = {
    "json": validate_json_format,
    "html": validate_html_format,
    "text": validate_text_format,
    "iri": validate_iri_format,
    "iri-reference": validate_iri_reference_format,
    "idn-email": validate_idn_email_format,
    "idn-hostname": validate_idn_hostname_format,
}

# Formats the structural checks accept without a custom predicate; the
# compiler's own format checker handles the ones it knows.
STANDARD_FORMATS = frozenset(
    {
        "date",
        "time",
        "date-time",
        "duration",
        "uri",
        "uri-reference",
        "uri-template",
        "url",
        "email",
        "hostname",
        "ipv4",
        "ipv6",
        "regex",
        "uuid",
        "json-pointer",
        "json-pointer-uri-fragment",
        "relative-json-pointer",
        "byte",
        "int32",
        "int64",
        "float",
        "double",
        "password",
        "binary",
    }
)

KNOWN_FORMATS = STANDARD_FORMATS | frozenset(CUSTOM_FORMATS)


def _strings_only(predicate: FormatPredicate) -> Callable[[Any], bool]:
    @wraps(predicate)
    def check(instance: Any) -> bool:
        if not isinstance(instance, str):
            return True
        return predicate(instance)

    return check


def register_formats(checker: FormatChecker) -> FormatChecker:
    """Register every custom format on ``checker`` and return it."""
    for name, predicate in CUSTOM_FORMATS.items():
        checker.checks(name)(_strings_only(predicate))
    return checker


__all__ = [
    "CUSTOM_FORMATS",
    "KNOWN_FORMATS",
    "STANDARD_FORMATS",
    "register_formats",
    "validate_html_format",
    "validate_idn_email_format",
    "validate_idn_hostname_format",
    "validate_iri_format",
    "validate_iri_reference_format",
    "validate_json_format",
    "validate_text_format",
]
