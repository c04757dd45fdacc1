"""The ``json`` format: a string holding any parseable JSON document."""

from __future__ import annotations

import orjson


def validate_json_format(value: str) -> bool:
    try:
        orjson.loads(value)
    except orjson.JSONDecodeError:
        return False
    return True
