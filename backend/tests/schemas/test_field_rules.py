"""Field Rules — reusable constraints exercised through the request schemas.

Invariants:
    - Messages name the field in human terms
    - Text limits, URL shape, ISO datetimes and tag length are enforced
    - camelCase on the wire, snake_case on the model
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from nestwell.core.validator import FieldError, validate
from nestwell.schemas.grocery_list import GroceryListCreate, GroceryItem
from nestwell.schemas.memory import MemoryCreate
from nestwell.schemas.parenting_activity import ActivityStatusUpdate
from nestwell.schemas.recipe import RecipeCreate
from nestwell.schemas.task import TaskCreate


def _memory(**overrides):
    body = {"coupleId": "c1", "type": "text", "content": "Picnic", "title": "Sunday"}
    body.update(overrides)
    return body


def _task(**overrides):
    body = {"coupleId": "c1", "title": "Book dentist", "assignedTo": "partner_a"}
    body.update(overrides)
    return body


# --- Text -------------------------------------------------------------------

def test_empty_required_text_reads_as_required():
    outcome = validate(MemoryCreate, _memory(title=""))
    assert outcome.errors == (FieldError("title", "Title is required"),)


def test_text_over_limit():
    outcome = validate(MemoryCreate, _memory(title="x" * 256))
    assert outcome.errors == (
        FieldError("title", "Title must be less than 255 characters"),
    )


def test_tag_over_limit_points_at_the_tag():
    outcome = validate(MemoryCreate, _memory(tags=["ok", "t" * 51]))
    assert outcome.errors == (
        FieldError("tags.1", "Tag must be less than 50 characters"),
    )


def test_memory_defaults():
    value = validate(MemoryCreate, _memory()).value
    assert value["tags"] == []
    assert value["is_private"] is False
    assert "description" not in value


def test_memory_type_must_be_known():
    outcome = validate(MemoryCreate, _memory(type="audio"))
    assert outcome.paths == ["type"]


# --- URLs -------------------------------------------------------------------

def test_invalid_image_url():
    body = {
        "name": "Tacos", "ingredients": [{"name": "Tortilla", "amount": "4"}],
        "instructions": "Fill and fold.", "prepTime": 10, "cookTime": 5,
        "servings": 2, "difficulty": "easy", "cuisine": "mexican",
        "imageUrl": "not a url",
    }
    outcome = validate(RecipeCreate, body)
    assert outcome.errors == (FieldError("imageUrl", "Invalid URL"),)

    body["imageUrl"] = "https://example.com/tacos.jpg"
    assert validate(RecipeCreate, body).value["image_url"] == "https://example.com/tacos.jpg"


# --- Datetimes --------------------------------------------------------------

def test_iso_datetime_is_parsed():
    value = validate(TaskCreate, _task(dueAt="2026-03-01T09:30:00")).value
    assert value["due_at"] == datetime(2026, 3, 1, 9, 30)


def test_date_only_string_is_midnight():
    value = validate(TaskCreate, _task(dueAt="2026-03-01")).value
    assert value["due_at"] == datetime(2026, 3, 1)


def test_garbage_datetime():
    outcome = validate(TaskCreate, _task(dueAt="next tuesday"))
    assert outcome.errors == (
        FieldError("dueAt", "Due at must be an ISO-8601 datetime"),
    )


def test_explicit_null_due_date_is_allowed():
    outcome = validate(TaskCreate, _task(dueAt=None))
    assert outcome.is_valid


# --- Task specifics ---------------------------------------------------------

def test_task_status_defaults_to_pending():
    value = validate(TaskCreate, _task()).value
    assert value["status"] == "pending"
    assert "ai_reasoning" not in value


def test_ai_reasoning_must_be_an_object():
    outcome = validate(TaskCreate, _task(aiReasoning="because"))
    assert outcome.errors == (
        FieldError("aiReasoning", "AI reasoning must be an object"),
    )


# --- Direct model construction ----------------------------------------------

def test_models_accept_field_names_and_aliases():
    by_alias = GroceryItem.model_validate({"name": "Eggs", "quantity": 12})
    by_name = GroceryItem(name="Eggs", quantity=12)
    assert by_alias == by_name
    assert by_alias.purchased is False


def test_models_are_frozen():
    item = GroceryItem(name="Eggs", quantity=12)
    with pytest.raises(ValidationError):
        item.quantity = 6


def test_unknown_keys_are_ignored():
    body = {
        "coupleId": "c1", "name": "Weekly", "items": [{"name": "Milk", "quantity": 1}],
        "totalBudget": 50, "assignedTo": "a", "color": "blue",
    }
    assert "color" not in validate(GroceryListCreate, body).value


def test_activity_status_is_validated():
    assert ActivityStatusUpdate.model_validate({"status": "COMPLETED"}).status == "COMPLETED"
    with pytest.raises(ValidationError):
        ActivityStatusUpdate.model_validate({"status": "completed"})
