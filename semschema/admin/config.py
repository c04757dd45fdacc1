"""Expose currently loaded server config for debugging."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..config import ServerConfig
from ..validation.registry import SchemaRegistry

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_config(request: Request) -> ServerConfig:
    return request.app.state.server_config


def _get_registry(request: Request) -> SchemaRegistry:
    return request.app.state.schema_registry


@router.get("/config")
async def config(
    request: Request,
    config: ServerConfig = Depends(_get_config),
    registry: SchemaRegistry = Depends(_get_registry),
) -> dict:
    return {
        "version": request.app.version,
        "strict": config.validation.strict,
        "schema_dir": str(config.registry.schema_dir),
        "schemas": registry.names(),
        "log_level": config.logging.level,
    }
