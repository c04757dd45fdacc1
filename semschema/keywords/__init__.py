"""Keywords added to, or replacing, the draft 2020-12 vocabulary."""

from __future__ import annotations

from .base import KeywordViolation
from .precision import MAX_PRECISION, MIN_PRECISION, is_valid_precision, precision
from .required import required

CUSTOM_KEYWORDS = {
    "required": required,
    "precision": precision,
}

__all__ = [
    "CUSTOM_KEYWORDS",
    "KeywordViolation",
    "MAX_PRECISION",
    "MIN_PRECISION",
    "is_valid_precision",
    "precision",
    "required",
]
