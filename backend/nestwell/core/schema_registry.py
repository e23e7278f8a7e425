"""Schema Registry — one immutable schema per (entity, operation) pair.

Invariants:
    - Built once at startup by build_schema_registry(); never mutated afterwards
    - Lookup of an unregistered pair raises SchemaNotFoundError (programming error)
    - No process-wide instance: the app stores it on app.state and injects it

Design Decisions:
    - MappingProxyType over a dict: read-only view, so handlers cannot register at runtime
    - Accepts plain strings as well as enums: routes and tests may pass either
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel

from nestwell.core.domain_types import EntityKind, Operation
from nestwell.core.errors import SchemaNotFoundError
from nestwell.schemas.grocery_list import (
    GroceryListCreate, GroceryListQuery, GroceryListUpdate,
)
from nestwell.schemas.meal_plan import MealPlanCreate, MealPlanQuery, MealPlanUpdate
from nestwell.schemas.memory import MemoryCreate, MemoryQuery, MemoryUpdate
from nestwell.schemas.parenting_activity import (
    ActivityStatusUpdate, ParentingActivityQuery,
)
from nestwell.schemas.recipe import RecipeCreate, RecipeQuery, RecipeUpdate
from nestwell.schemas.task import TaskCreate, TaskQuery, TaskUpdate

SchemaKey = tuple[EntityKind, Operation]


class SchemaRegistry:
    """Read-only lookup of request schemas by (entity, operation)."""

    def __init__(self, schemas: Mapping[SchemaKey, type[BaseModel]]):
        self._schemas = MappingProxyType(dict(schemas))

    def get(
        self, entity: EntityKind | str, operation: Operation | str,
    ) -> type[BaseModel]:
        try:
            key = (EntityKind(entity), Operation(operation))
            return self._schemas[key]
        except (ValueError, KeyError):
            raise SchemaNotFoundError(str(entity), str(operation)) from None

    def __contains__(self, key: tuple) -> bool:
        entity, operation = key
        try:
            return (EntityKind(entity), Operation(operation)) in self._schemas
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._schemas)


def build_schema_registry() -> SchemaRegistry:
    """Build the registry with every schema the API accepts."""
    E, Op = EntityKind, Operation
    return SchemaRegistry({
        (E.GROCERY_LIST, Op.CREATE): GroceryListCreate,
        (E.GROCERY_LIST, Op.UPDATE): GroceryListUpdate,
        (E.GROCERY_LIST, Op.QUERY): GroceryListQuery,
        (E.MEAL_PLAN, Op.CREATE): MealPlanCreate,
        (E.MEAL_PLAN, Op.UPDATE): MealPlanUpdate,
        (E.MEAL_PLAN, Op.QUERY): MealPlanQuery,
        (E.MEMORY, Op.CREATE): MemoryCreate,
        (E.MEMORY, Op.UPDATE): MemoryUpdate,
        (E.MEMORY, Op.QUERY): MemoryQuery,
        (E.RECIPE, Op.CREATE): RecipeCreate,
        (E.RECIPE, Op.UPDATE): RecipeUpdate,
        (E.RECIPE, Op.QUERY): RecipeQuery,
        (E.TASK, Op.CREATE): TaskCreate,
        (E.TASK, Op.UPDATE): TaskUpdate,
        (E.TASK, Op.QUERY): TaskQuery,
        (E.PARENTING_ACTIVITY, Op.UPDATE): ActivityStatusUpdate,
        (E.PARENTING_ACTIVITY, Op.QUERY): ParentingActivityQuery,
    })
