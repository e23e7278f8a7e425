"""Grocery Lists — couple-scoped shopping lists.

Invariants:
    - New lists always start as "pending"; status is not client-settable on create
    - Listing requires coupleId; status and assignedTo accept "all" as no filter
"""

import logging

from fastapi import APIRouter, Depends, status

from nestwell.api.dependencies import (
    get_entity_store, get_validator, read_json_body, read_query,
)
from nestwell.core.domain_types import EntityKind, Operation, ProgressStatus
from nestwell.core.query_coercion import build_filter
from nestwell.core.repository_protocols import EntityStore
from nestwell.core.validator import Validator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/grocery-lists", tags=["grocery-lists"])

ENTITY = EntityKind.GROCERY_LIST


@router.get("")
async def list_grocery_lists(
    raw: dict = Depends(read_query),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    """Grocery lists for a couple: pending first, then by due date."""
    query = validator.parse(ENTITY, Operation.QUERY, raw)
    return await store.find_many(ENTITY, build_filter(ENTITY, query))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_grocery_list(
    body=Depends(read_json_body),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    value = validator.parse(ENTITY, Operation.CREATE, body)
    value["status"] = ProgressStatus.PENDING.value
    return await store.create(ENTITY, value)
