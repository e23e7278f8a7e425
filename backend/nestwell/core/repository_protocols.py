"""Boundary Protocols — contracts between the HTTP layer and persistence.

Invariants:
    - Routes depend on these Protocols, never on SQLAlchemy directly
    - Stores receive already-validated, normalized values and schema-derived Filters
    - Stores return plain dicts with composite columns already decoded
    - Persistence failures propagate (DatabaseError); they are never turned into
      empty results

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes in tests need no base class
    - update_status_and_maybe_create_completion is the single compound write: both
      statements commit together or not at all
"""

from dataclasses import dataclass
from typing import Any, Protocol

from nestwell.core.domain_types import ActivityStatus, CoupleId, EntityId, EntityKind
from nestwell.core.query_coercion import Filter


@dataclass(frozen=True)
class RewardGrant:
    """Coins awarded to a couple alongside a create, in the same transaction."""
    couple_id: CoupleId
    coins: int
    activity: str


class EntityStore(Protocol):
    """CRUD contract for the registry-backed entity kinds."""
    async def find_many(self, entity: EntityKind, filter: Filter) -> list[dict]: ...
    async def get(self, entity: EntityKind, entity_id: EntityId) -> dict | None: ...
    async def create(
        self, entity: EntityKind, value: dict[str, Any],
        reward: RewardGrant | None = None,
    ) -> dict: ...
    async def update(
        self, entity: EntityKind, entity_id: EntityId, partial: dict[str, Any],
    ) -> dict: ...
    async def delete(self, entity: EntityKind, entity_id: EntityId) -> None: ...


class ActivityStore(Protocol):
    """Contract for scheduled parenting activities."""
    async def list_for_couple(self, couple_id: CoupleId) -> list[dict]: ...
    async def update_status_and_maybe_create_completion(
        self, activity_id: EntityId, status: ActivityStatus,
    ) -> dict: ...
