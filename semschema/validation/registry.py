"""Registry of the schema documents shipped with the service."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from functools import lru_cache
from pathlib import Path
from typing import Any

from ..config import get_server_config
from .api import assert_valid_schema, validate_data
from .errors import ValidationResult

logger = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".schema.json"


class SchemaRegistry:
    def __init__(self, schema_dir: Path, *, strict: bool = False) -> None:
        self._schema_dir = schema_dir
        self._strict = strict
        self._schemas: dict[str, dict[str, Any]] = {}
        self._load()

    def _load(self) -> None:
        for schema_path in sorted(self._schema_dir.glob(f"*{SCHEMA_SUFFIX}")):
            name = schema_path.name[: -len(SCHEMA_SUFFIX)]
            data = json.loads(schema_path.read_text(encoding="utf-8"))
            assert_valid_schema(data, strict=self._strict)
            self._schemas[name] = data
        logger.info("loaded %d schema(s) from %s", len(self._schemas), self._schema_dir)

    def names(self) -> list[str]:
        return sorted(self._schemas)

    def get(self, schema_name: str) -> dict[str, Any]:
        try:
            return deepcopy(self._schemas[schema_name])
        except KeyError as exc:
            raise ValueError(f"unknown schema {schema_name}") from exc

    def validate(self, schema_name: str, payload: Any) -> ValidationResult:
        # Compiled per call; only the documents are kept.
        return validate_data(payload, self.get(schema_name), strict=self._strict)


@lru_cache(maxsize=1)
def get_schema_registry() -> SchemaRegistry:
    config = get_server_config()
    return SchemaRegistry(config.registry.schema_dir, strict=config.validation.strict)
