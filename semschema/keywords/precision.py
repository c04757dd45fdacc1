"""``precision`` keyword: upper bound on the decimal places of a number."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Iterator

from .base import KeywordViolation

MIN_PRECISION = 0
MAX_PRECISION = 4


def is_valid_precision(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return MIN_PRECISION <= value <= MAX_PRECISION


def number_to_string(value: int | float) -> str:
    """Render ``value`` the way ECMAScript's ``Number.prototype.toString`` does.

    Shortest round-trip digits; plain notation for 1e-7 < |value| < 1e21 and
    exponent notation (``1.5e-7``, ``1e+21``) outside that range.
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0") or "0"
    # value == 0.<digits> * 10 ** point
    point = len(digit_tuple) + exponent
    size = len(digits)
    if size <= point <= 21:
        text = digits + "0" * (point - size)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        shift = point - 1
        mantissa = digits if size == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if shift >= 0 else '-'}{abs(shift)}"
    return sign + text


def count_decimal_places(value: int | float) -> int:
    # Measured on the canonical string, not the exact binary value.
    _, _, fraction = number_to_string(value).partition(".")
    return len(fraction)


def precision(validator: Any, precision: Any, instance: Any, schema: Any) -> Iterator[KeywordViolation]:
    if not validator.is_type(instance, "number"):
        return
    if not is_valid_precision(precision):
        yield KeywordViolation(
            f"precision must be an integer between {MIN_PRECISION} and {MAX_PRECISION}",
            params={"precision": precision},
        )
        return
    limit = int(precision)
    actual = count_decimal_places(instance)
    if actual > limit:
        yield KeywordViolation(
            f"must have at most {limit} decimal places",
            params={"precision": limit, "actual": actual},
        )
