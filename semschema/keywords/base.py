"""Shared error type for the vocabulary's keyword callables."""

from __future__ import annotations

from typing import Any

from jsonschema import ValidationError


class KeywordViolation(ValidationError):
    """A ``jsonschema`` error that also carries keyword diagnostics."""

    def __init__(self, message: str, *, params: dict[str, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.params = dict(params or {})
