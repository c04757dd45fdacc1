"""IRI formats from draft 2019-09+, checked permissively.

Neither percent-encoding nor Unicode normalization is enforced.
"""

from __future__ import annotations

import re

_SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.-]*:", re.IGNORECASE)
_FORBIDDEN_REFERENCE_CHARS = re.compile(r"[\s<>{}|\\^`]")


def validate_iri_format(value: str) -> bool:
    if not value:
        return False
    return _SCHEME_PATTERN.match(value) is not None


def validate_iri_reference_format(value: str) -> bool:
    """Accept absolute IRIs, relative paths, fragments and queries alike."""
    if not value:
        return False
    return _FORBIDDEN_REFERENCE_CHARS.search(value) is None
