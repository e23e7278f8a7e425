"""Tasks — shared household to-dos, optionally carrying AI reasoning.

Invariants:
    - status defaults to "pending" on create
    - aiReasoning is an opaque object, stored as canonical JSON
"""

from fastapi import APIRouter, Depends, status

from nestwell.api.dependencies import (
    get_entity_store, get_validator, read_json_body, read_query,
)
from nestwell.core.domain_types import EntityKind, Operation
from nestwell.core.query_coercion import build_filter
from nestwell.core.repository_protocols import EntityStore
from nestwell.core.validator import Validator

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])

ENTITY = EntityKind.TASK


@router.get("")
async def list_tasks(
    raw: dict = Depends(read_query),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    query = validator.parse(ENTITY, Operation.QUERY, raw)
    return await store.find_many(ENTITY, build_filter(ENTITY, query))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    body=Depends(read_json_body),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    value = validator.parse(ENTITY, Operation.CREATE, body)
    return await store.create(ENTITY, value)
