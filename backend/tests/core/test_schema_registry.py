"""Schema Registry — immutable (entity, operation) -> schema lookup."""

import pytest

from nestwell.core.domain_types import EntityKind, Operation
from nestwell.core.errors import SchemaNotFoundError
from nestwell.core.schema_registry import SchemaRegistry, build_schema_registry
from nestwell.schemas.recipe import RecipeCreate


@pytest.fixture
def registry():
    return build_schema_registry()


def test_registers_every_crud_pair(registry):
    crud = [e for e in EntityKind if e is not EntityKind.PARENTING_ACTIVITY]
    for entity in crud:
        for operation in Operation:
            assert (entity, operation) in registry
    assert ("parenting_activity", "update") in registry
    assert ("parenting_activity", "query") in registry
    assert len(registry) == 17


def test_lookup_accepts_strings(registry):
    assert registry.get("recipe", "create") is RecipeCreate
    assert registry.get(EntityKind.RECIPE, Operation.CREATE) is RecipeCreate


def test_unregistered_pair_raises(registry):
    with pytest.raises(SchemaNotFoundError) as exc_info:
        registry.get("parenting_activity", "create")
    assert exc_info.value.http_status == 500


def test_unknown_names_raise_schema_not_found(registry):
    with pytest.raises(SchemaNotFoundError):
        registry.get("pet", "create")
    assert ("pet", "create") not in registry


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry._schemas[(EntityKind.RECIPE, Operation.CREATE)] = None


def test_registries_are_independent():
    custom = SchemaRegistry({(EntityKind.RECIPE, Operation.CREATE): RecipeCreate})
    assert len(custom) == 1
    with pytest.raises(SchemaNotFoundError):
        custom.get("task", "create")
