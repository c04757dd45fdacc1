"""The ``html`` format: a string carrying at least one HTML-like tag."""

from __future__ import annotations

import re

_TAG_PATTERN = re.compile(r"<[a-z][\s\S]*>", re.IGNORECASE)


def validate_html_format(value: str) -> bool:
    # Only checks that markup is present; well-formedness is not enforced.
    return _TAG_PATTERN.search(value) is not None
