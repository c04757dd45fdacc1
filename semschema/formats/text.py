"""The ``text`` format: free-form, possibly multi-line text."""

from __future__ import annotations


def validate_text_format(value: str) -> bool:
    return isinstance(value, str)
