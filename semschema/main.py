from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.responses import ORJSONResponse

from .admin import config as admin_config
from .admin import health as admin_health
from .config import ServerConfig, configure_logging, get_server_config
from .forms.controls import default_values, describe_form
from .forms.fields import validate_form_field
from .validation.api import validate_data, validate_schema
from .validation.errors import InvalidSchemaError
from .validation.registry import SchemaRegistry, get_schema_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    server_config = get_server_config()
    configure_logging(server_config)
    schema_registry = get_schema_registry()

    app.state.server_config = server_config
    app.state.schema_registry = schema_registry
    app.state.start_time = datetime.now(timezone.utc)
    logger.info("semschema service ready (strict=%s)", server_config.validation.strict)

    yield


app = FastAPI(
    title="SemSchema Validation Service",
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)

app.include_router(admin_health.router)
app.include_router(admin_config.router)


# Dependency helpers ---------------------------------------------------------


def get_server_settings(request: Request) -> ServerConfig:
    return request.app.state.server_config


def get_schema_service(request: Request) -> SchemaRegistry:
    return request.app.state.schema_registry


def _require(payload: dict[str, Any], key: str) -> Any:
    if key not in payload:
        raise HTTPException(status_code=400, detail=f"{key} is required")
    return payload[key]


def _schema_object(payload: dict[str, Any]) -> dict[str, Any]:
    schema = _require(payload, "schema")
    if not isinstance(schema, dict):
        raise HTTPException(status_code=422, detail="schema must be a JSON object")
    return schema


# Routes ---------------------------------------------------------------------


@app.post("/schemas/validate", tags=["validation"])
async def check_schema(
    payload: dict[str, Any] = Body(...),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    schema = _require(payload, "schema")
    return validate_schema(schema, strict=settings.validation.strict).as_dict()


@app.post("/data/validate", tags=["validation"])
async def check_data(
    payload: dict[str, Any] = Body(...),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    schema = _require(payload, "schema")
    data = payload.get("data")
    try:
        result = validate_data(data, schema, strict=settings.validation.strict)
    except InvalidSchemaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return result.as_dict()


@app.post("/fields/validate", tags=["forms"])
async def check_field(
    payload: dict[str, Any] = Body(...),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    schema = _schema_object(payload)
    field_name = _require(payload, "field")
    try:
        error = validate_form_field(
            payload.get("value"), schema, field_name, strict=settings.validation.strict
        )
    except InvalidSchemaError as exc:
        # Shown in place of the field error; never a raw traceback.
        return {"field": field_name, "error": str(exc)}
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"field": field_name, "error": error}


@app.post("/forms/describe", tags=["forms"])
async def describe(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    schema = _schema_object(payload)
    return {
        "fields": [field.as_dict() for field in describe_form(schema)],
        "defaults": default_values(schema),
    }


@app.get("/schemas", tags=["registry"])
async def list_schemas(schemas: SchemaRegistry = Depends(get_schema_service)) -> dict[str, Any]:
    return {"schemas": schemas.names()}


@app.get("/schemas/{schema_name}", tags=["registry"])
async def get_schema(
    schema_name: str,
    schemas: SchemaRegistry = Depends(get_schema_service),
) -> dict[str, Any]:
    try:
        return schemas.get(schema_name)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/schemas/{schema_name}/validate", tags=["registry"])
async def check_registered_data(
    schema_name: str,
    payload: dict[str, Any] = Body(...),
    schemas: SchemaRegistry = Depends(get_schema_service),
) -> dict[str, Any]:
    try:
        result = schemas.validate(schema_name, payload.get("data"))
    except InvalidSchemaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return result.as_dict()
