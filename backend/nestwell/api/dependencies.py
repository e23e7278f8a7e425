"""Route Dependencies — validator, stores, and raw request input for route handlers.

Invariants:
    - The Validator is built from the registry on app.state; no module-level registry
    - Stores wrap the request's AsyncSession from get_db (one session per request)
    - Bodies reach the Validator as parsed JSON; malformed JSON is a 400 with path ""
    - Query strings reach the Validator flattened by coerce_query_params()
"""

import json
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nestwell.config import get_settings
from nestwell.core.errors import RequestValidationFailedError
from nestwell.core.query_coercion import coerce_query_params
from nestwell.core.repository_protocols import ActivityStore, EntityStore
from nestwell.core.validator import Validator
from nestwell.infrastructure.activity_store import SqlActivityStore
from nestwell.infrastructure.database import get_db
from nestwell.infrastructure.entity_store import SqlEntityStore


def get_validator(request: Request) -> Validator:
    return Validator(request.app.state.schema_registry)


def get_entity_store(db: AsyncSession = Depends(get_db)) -> EntityStore:
    return SqlEntityStore(db)


def get_activity_store(db: AsyncSession = Depends(get_db)) -> ActivityStore:
    return SqlActivityStore(db)


async def read_json_body(request: Request) -> Any:
    """Parsed JSON body, or a 400 in the standard validation envelope."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise RequestValidationFailedError(
            [{"path": "", "message": "Request body must be valid JSON"}],
        ) from None


def read_query(request: Request) -> dict[str, str]:
    """Flattened query params with the configured page size as the default limit."""
    raw = coerce_query_params(request.query_params)
    raw.setdefault("limit", str(get_settings().default_page_size))
    return raw
