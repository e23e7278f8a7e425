"""Grocery List Schemas — create/update bodies and list query.

Invariants:
    - A list needs at least one item; every item quantity is positive
    - purchased defaults to False on every item
    - status filter accepts the "all" sentinel; assignedTo is free text ("all" = no filter)
"""

from pydantic import Field

from nestwell.core.domain_types import ProgressStatus
from nestwell.core.field_rules import (
    bounded_int, flag, non_empty_list, non_negative_number,
    optional_datetime, optional_text, positive_number, required_text,
    sentinel_choice,
)
from nestwell.schemas.base import NestwellSchema, make_partial


class GroceryItem(NestwellSchema):
    name: required_text("Item name")
    quantity: positive_number("Quantity")
    unit: optional_text("Unit") = None
    price: non_negative_number("Price") = None
    category: optional_text("Category") = None
    purchased: flag() = False


class GroceryListCreate(NestwellSchema):
    couple_id: required_text("Couple ID")
    name: required_text("Name", 255)
    items: non_empty_list(GroceryItem, "At least one item is required")
    total_budget: positive_number("Budget")
    assigned_to: required_text("Assigned user")
    due_date: optional_datetime("Due date") = None


GroceryListUpdate = make_partial(GroceryListCreate, "GroceryListUpdate")


class GroceryListQuery(NestwellSchema):
    couple_id: required_text("Couple ID")
    status: sentinel_choice(ProgressStatus) | None = None
    assigned_to: optional_text("Assigned user") = None
    limit: bounded_int("Limit", 1, 100) = Field(default=50)
    offset: bounded_int("Offset", 0) = Field(default=0)
