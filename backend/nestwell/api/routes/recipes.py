"""Recipes — the shared recipe book.

Invariants:
    - Recipes are not couple-scoped; listing needs no coupleId
    - A recipe created without nutrition stores zeroed macros, never null
    - isFavorite=true filters to favourites; isFavorite=false is no filter
"""

from fastapi import APIRouter, Depends, status

from nestwell.api.dependencies import (
    get_entity_store, get_validator, read_json_body, read_query,
)
from nestwell.core.domain_types import EntityKind, Operation
from nestwell.core.query_coercion import build_filter
from nestwell.core.repository_protocols import EntityStore
from nestwell.core.validator import Validator

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])

ENTITY = EntityKind.RECIPE

ZERO_NUTRITION = {"calories": 0, "protein": 0, "carbs": 0, "fats": 0}


@router.get("")
async def list_recipes(
    raw: dict = Depends(read_query),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    """Favourites first, newest first within each group."""
    query = validator.parse(ENTITY, Operation.QUERY, raw)
    return await store.find_many(ENTITY, build_filter(ENTITY, query))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    body=Depends(read_json_body),
    validator: Validator = Depends(get_validator),
    store: EntityStore = Depends(get_entity_store),
):
    value = validator.parse(ENTITY, Operation.CREATE, body)
    value.setdefault("nutrition", dict(ZERO_NUTRITION))
    return await store.create(ENTITY, value)
