"""Dual-mode ``required`` keyword.

A list names properties an object must carry (object level); a boolean marks
the value it is attached to as mandatory (property level). The two meanings
are told apart by the type of the keyword value only.
"""

from __future__ import annotations

from typing import Any, Iterator

from .base import KeywordViolation


def required(validator: Any, required: Any, instance: Any, schema: Any) -> Iterator[KeywordViolation]:
    if isinstance(required, bool):
        yield from _required_value(required, instance)
    elif isinstance(required, list):
        yield from _required_properties(validator, required, instance)


def _required_properties(validator: Any, names: list[str], instance: Any) -> Iterator[KeywordViolation]:
    if not validator.is_type(instance, "object"):
        return
    for name in names:
        if name not in instance:
            # Only the first missing property is reported.
            yield KeywordViolation(
                f"must have required property '{name}'",
                params={"missingProperty": name},
            )
            return


def _required_value(flag: bool, instance: Any) -> Iterator[KeywordViolation]:
    if not flag:
        return
    if instance is None:
        yield KeywordViolation("must not be null or undefined", params={"required": True})
    elif isinstance(instance, str) and instance == "":
        yield KeywordViolation("must not be empty", params={"required": True})
