"""SQL Entity Store — SQLAlchemy implementation of the EntityStore protocol.

Invariants:
    - Composite columns are encoded on every write and decoded on every read through
      core/column_codec.py; no other code touches their text
    - A corrupt composite column surfaces as CodecError (logged as a data-integrity
      signal), never as an empty value
    - Filters arrive as Equals/Between clauses; this module never reads raw query params
    - With a tag filter, pagination is applied after the in-memory tag intersection

Design Decisions:
    - One store class for the five CRUD entities, driven by per-entity tables
      (model, composite columns, ordering): the entities differ only in data
    - Commit per operation: each route performs exactly one write unit
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nestwell.core.column_codec import decode_column, encode_optional
from nestwell.core.domain_types import ColumnKind, EntityId, EntityKind
from nestwell.core.errors import CodecError, ErrorContext, ResourceNotFoundError
from nestwell.core.query_coercion import Between, Clause, Equals, Filter, apply_tag_filter
from nestwell.core.repository_protocols import RewardGrant
from nestwell.db.base import Base
from nestwell.models import (
    GroceryList, MealPlan, Memory, Recipe, RewardTransaction, Task,
)

logger = logging.getLogger(__name__)

_MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.GROCERY_LIST: GroceryList,
    EntityKind.MEAL_PLAN: MealPlan,
    EntityKind.MEMORY: Memory,
    EntityKind.RECIPE: Recipe,
    EntityKind.TASK: Task,
}

_COMPOSITE_COLUMNS: dict[EntityKind, tuple[ColumnKind, ...]] = {
    EntityKind.GROCERY_LIST: (ColumnKind.ITEMS,),
    EntityKind.MEAL_PLAN: (ColumnKind.MEALS, ColumnKind.NUTRITION),
    EntityKind.MEMORY: (ColumnKind.TAGS, ColumnKind.PARTNERS),
    EntityKind.RECIPE: (ColumnKind.INGREDIENTS, ColumnKind.TAGS, ColumnKind.NUTRITION),
    EntityKind.TASK: (ColumnKind.AI_REASONING,),
}

_ORDERING: dict[EntityKind, Callable[[Any], Sequence]] = {
    EntityKind.GROCERY_LIST: lambda m: (
        m.status.asc(), m.due_date.asc(), m.created_at.desc(),
    ),
    EntityKind.MEAL_PLAN: lambda m: (m.date.desc(),),
    EntityKind.MEMORY: lambda m: (m.date.desc(), m.created_at.desc()),
    EntityKind.RECIPE: lambda m: (m.is_favorite.desc(), m.created_at.desc()),
    EntityKind.TASK: lambda m: (m.due_at.asc(), m.created_at.desc()),
}

_RESOURCE_NAMES = {
    EntityKind.GROCERY_LIST: "Grocery list",
    EntityKind.MEAL_PLAN: "Meal plan",
    EntityKind.MEMORY: "Memory",
    EntityKind.RECIPE: "Recipe",
    EntityKind.TASK: "Task",
}


def _where(model: type[Base], clauses: Sequence[Clause]) -> list:
    conditions = []
    for clause in clauses:
        column = getattr(model, clause.column)
        if isinstance(clause, Equals):
            conditions.append(column == clause.value)
        elif isinstance(clause, Between):
            conditions.append(column.between(clause.start, clause.end))
    return conditions


def encode_row_values(entity: EntityKind, value: dict[str, Any]) -> dict[str, Any]:
    """Replace composite values with their JSON text; other fields pass through."""
    encoded = dict(value)
    for column in _COMPOSITE_COLUMNS[entity]:
        if column.value in encoded:
            encoded[column.value] = encode_optional(column, encoded[column.value])
    return encoded


def row_to_dict(entity: EntityKind, row: Base) -> dict[str, Any]:
    """ORM row -> response dict with composite columns decoded."""
    data = {attr.key: getattr(row, attr.key) for attr in row.__mapper__.column_attrs}
    for column in _COMPOSITE_COLUMNS[entity]:
        try:
            data[column.value] = decode_column(column, data[column.value])
        except CodecError as e:
            e.context = ErrorContext(entity=entity.value, resource_id=str(data["id"]))
            logger.error(
                f"Corrupt serialized column on {entity.value} {data['id']}: {e.reason}",
                extra={
                    "entity": entity.value, "column": column.value,
                    "resource_id": str(data["id"]), "error_code": e.code,
                },
            )
            raise
    return data


class SqlEntityStore:
    """EntityStore backed by one AsyncSession (one per request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_many(self, entity: EntityKind, filter: Filter) -> list[dict]:
        model = _MODELS[entity]
        query = (
            select(model)
            .where(*_where(model, filter.clauses))
            .order_by(*_ORDERING[entity](model))
        )
        if not filter.has_tag_filter:
            if filter.limit is not None:
                query = query.limit(filter.limit)
            query = query.offset(filter.offset)

        result = await self.db.execute(query)
        rows = [row_to_dict(entity, r) for r in result.scalars().all()]

        if filter.has_tag_filter:
            rows = apply_tag_filter(rows, filter.tags)
            end = None if filter.limit is None else filter.offset + filter.limit
            rows = rows[filter.offset:end]
        return rows

    async def _get_row(self, entity: EntityKind, entity_id: EntityId) -> Base:
        row = await self.db.get(_MODELS[entity], entity_id)
        if row is None:
            raise ResourceNotFoundError(
                _RESOURCE_NAMES[entity], str(entity_id),
                ErrorContext(entity=entity.value, resource_id=str(entity_id)),
            )
        return row

    async def get(self, entity: EntityKind, entity_id: EntityId) -> dict | None:
        row = await self.db.get(_MODELS[entity], entity_id)
        return row_to_dict(entity, row) if row is not None else None

    async def create(
        self, entity: EntityKind, value: dict[str, Any],
        reward: RewardGrant | None = None,
    ) -> dict:
        row = _MODELS[entity](**encode_row_values(entity, value))
        self.db.add(row)
        if reward is not None:
            self.db.add(RewardTransaction(
                couple_id=reward.couple_id,
                coins_earned=reward.coins,
                activity=reward.activity,
            ))
        await self.db.commit()
        await self.db.refresh(row)
        logger.info(
            f"Created {entity.value} {row.id}",
            extra={"entity": entity.value, "resource_id": str(row.id)},
        )
        return row_to_dict(entity, row)

    async def update(
        self, entity: EntityKind, entity_id: EntityId, partial: dict[str, Any],
    ) -> dict:
        row = await self._get_row(entity, entity_id)
        for key, val in encode_row_values(entity, partial).items():
            setattr(row, key, val)
        await self.db.commit()
        await self.db.refresh(row)
        return row_to_dict(entity, row)

    async def delete(self, entity: EntityKind, entity_id: EntityId) -> None:
        row = await self._get_row(entity, entity_id)
        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"Deleted {entity.value} {entity_id}",
            extra={"entity": entity.value, "resource_id": str(entity_id)},
        )
