"""Memories — the couple's journal, with derived sentiment and a coin reward.

Invariants:
    - sentiment is computed from content + description on create; clients cannot set it
    - partners starts as ["partner_a"] (the author)
    - Every created memory awards memory_reward_coins in the same transaction as
      the insert: no memory without its reward, no reward without its memory
    - get/update/delete of an unknown id -> 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from nestwell.api.dependencies import (
    get_entity_store, get_validator, read_json_body, read_query,
)
from nestwell.config import get_settings
from nestwell.core.domain_types import CoupleId, EntityKind, Operation
from nestwell.core.errors import ErrorContext, ResourceNotFoundError
from nestwell.core.query_coercion import build_filter
from nestwell.core.repository_protocols import EntityStore, RewardGrant
from nestwell.core.sentiment import analyze_sentiment
from nestwell.core.validator import Validator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/memories", tags=["memories"])

ENTITY = EntityKind.MEMORY
DEFAULT_PARTNERS = ("partner_a",)


@router.get("")
async def list_memories(
    raw: dict = Depends(read_query),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    """Newest first. tags=a,b keeps memories carrying any of the given tags."""
    query = validator.parse(ENTITY, Operation.QUERY, raw)
    return await store.find_many(ENTITY, build_filter(ENTITY, query))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_memory(
    body=Depends(read_json_body),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    value = validator.parse(ENTITY, Operation.CREATE, body)
    text = f"{value['content']} {value.get('description') or ''}"
    value["sentiment"] = analyze_sentiment(text).value
    value["partners"] = list(DEFAULT_PARTNERS)

    reward = RewardGrant(
        couple_id=CoupleId(value["couple_id"]),
        coins=get_settings().memory_reward_coins,
        activity=f"Created memory: {value['title']}",
    )
    memory = await store.create(ENTITY, value, reward=reward)
    logger.info(
        f"Memory reward granted: {reward.coins} coins",
        extra={"couple_id": reward.couple_id, "resource_id": str(memory["id"])},
    )
    return memory


@router.get("/{memory_id}")
async def get_memory(
    memory_id: UUID, store: EntityStore = Depends(get_entity_store),
):
    memory = await store.get(ENTITY, memory_id)
    if memory is None:
        raise ResourceNotFoundError(
            "Memory", str(memory_id),
            ErrorContext(entity=ENTITY.value, resource_id=str(memory_id)),
        )
    return memory


@router.put("/{memory_id}")
async def update_memory(
    memory_id: UUID,
    body=Depends(read_json_body),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    """Partial update: only the fields present in the body change."""
    partial = validator.parse(ENTITY, Operation.UPDATE, body)
    return await store.update(ENTITY, memory_id, partial)


@router.delete("/{memory_id}")
async def delete_memory(
    memory_id: UUID, store: EntityStore = Depends(get_entity_store),
):
    await store.delete(ENTITY, memory_id)
    return {"message": "Memory deleted successfully"}
