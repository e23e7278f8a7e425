"""Query Coercion — adapt URL query strings into validator input and typed filters.

Invariants:
    - coerce_query_params() output is flat str -> str; repeated keys keep the last value
    - Empty values ("?status=") are absent, never validated as ""
    - build_filter() is the only producer of Filter values: absence and the "all"
      sentinel both yield no clause
    - Tag filtering is post-fetch (intersection with the stored tag array), not a
      store-level clause

Design Decisions:
    - Filter as a tagged variant (Equals | Between) over ad hoc where-dicts: the shape
      reaching the store is always schema-derived
    - Meal-plan date range only when both bounds present (matches the web client, which
      always sends both or neither)
    - Pagination rides on the Filter so stores can apply it after tag filtering
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from nestwell.core.domain_types import QUERY_SENTINEL, EntityKind


# ─── Coercion ────────────────────────────────────────────────────

def coerce_query_params(params: Mapping[str, str] | Any) -> dict[str, str]:
    """Flatten a (multi-)map of query params into the validator's input shape."""
    if hasattr(params, "multi_items"):
        pairs: Iterable[tuple[str, str]] = params.multi_items()
    else:
        pairs = params.items()
    data: dict[str, str] = {}
    for key, value in pairs:
        if value == "":
            data.pop(key, None)
            continue
        data[key] = value
    return data


def split_tags(raw: str | None) -> tuple[str, ...]:
    """Comma-separated tag filter -> trimmed, non-empty tags."""
    if not raw:
        return ()
    return tuple(t.strip() for t in raw.split(",") if t.strip())


# ─── Filter variant ──────────────────────────────────────────────

@dataclass(frozen=True)
class Equals:
    column: str
    value: Any


@dataclass(frozen=True)
class Between:
    column: str
    start: datetime
    end: datetime


Clause = Equals | Between


@dataclass(frozen=True)
class Filter:
    clauses: tuple[Clause, ...] = ()
    tags: tuple[str, ...] = ()
    limit: int | None = None
    offset: int = 0

    @property
    def has_tag_filter(self) -> bool:
        return bool(self.tags)


# Query fields that map 1:1 onto an equality clause, per entity
_EQUALITY_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.GROCERY_LIST: ("couple_id", "status", "assigned_to"),
    EntityKind.MEAL_PLAN: ("couple_id",),
    EntityKind.MEMORY: ("couple_id", "type", "sentiment"),
    EntityKind.RECIPE: ("cuisine", "difficulty"),
    EntityKind.TASK: ("couple_id", "status", "assigned_to", "category"),
}


def _is_active(value: Any) -> bool:
    return value is not None and value != QUERY_SENTINEL


def build_filter(entity: EntityKind | str, query: Mapping[str, Any]) -> Filter:
    """Build the store filter from a normalized (validated) query."""
    entity = EntityKind(entity)
    clauses: list[Clause] = [
        Equals(name, query[name])
        for name in _EQUALITY_FIELDS.get(entity, ())
        if _is_active(query.get(name))
    ]
    if entity is EntityKind.RECIPE and query.get("is_favorite") == "true":
        clauses.append(Equals("is_favorite", True))
    if entity is EntityKind.MEAL_PLAN:
        start, end = query.get("start_date"), query.get("end_date")
        if start is not None and end is not None:
            clauses.append(Between("date", start, end))
    return Filter(
        clauses=tuple(clauses),
        tags=split_tags(query.get("tags")),
        limit=query.get("limit"),
        offset=query.get("offset", 0),
    )


def apply_tag_filter(rows: list[dict], tags: tuple[str, ...]) -> list[dict]:
    """Keep rows whose stored tags contain at least one requested tag."""
    if not tags:
        return rows
    wanted = set(tags)
    return [r for r in rows if wanted.intersection(r.get("tags") or ())]
