"""Configuration helpers for the validation service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_SERVER_CONFIG = Path(__file__).resolve().parent / "server.yaml"
_DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"


@dataclass(frozen=True)
class ValidationConfig:
    strict: bool


@dataclass(frozen=True)
class RegistryConfig:
    schema_dir: Path


@dataclass(frozen=True)
class LoggingConfig:
    level: str


@dataclass(frozen=True)
class ServerConfig:
    validation: ValidationConfig
    registry: RegistryConfig
    logging: LoggingConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return yaml.safe_load(path.read_text()) or {}


def _resolve_dir(value: Any, base: Path) -> Path:
    if not value:
        return _DEFAULT_SCHEMA_DIR
    path = Path(value)
    return path if path.is_absolute() else (base / path).resolve()


@lru_cache(maxsize=1)
def get_server_config() -> ServerConfig:
    path = Path(os.getenv("SEMSCHEMA_CONFIG_PATH", _DEFAULT_SERVER_CONFIG))
    data = _load_yaml(path)
    validation = data.get("validation", {})
    registry = data.get("registry", {})
    log = data.get("logging", {})
    return ServerConfig(
        validation=ValidationConfig(strict=bool(validation.get("strict", False))),
        registry=RegistryConfig(
            schema_dir=_resolve_dir(registry.get("schema_dir"), path.resolve().parent),
        ),
        logging=LoggingConfig(level=str(log.get("level", "INFO")).upper()),
    )


def configure_logging(config: ServerConfig) -> None:
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
