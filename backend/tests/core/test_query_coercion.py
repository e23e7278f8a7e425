"""Query Coercion — URL params into validator input, normalized queries into Filters.

Tests cover:
    - Last value wins for repeated keys; empty values are absent
    - "all" and absence produce the same Filter
    - Recipe favourites and meal-plan date ranges
    - Tag splitting and post-fetch tag intersection
"""

from datetime import datetime

from starlette.datastructures import QueryParams

from nestwell.core.query_coercion import (
    Between, Equals, Filter, apply_tag_filter, build_filter,
    coerce_query_params, split_tags,
)
from nestwell.core.validator import validate
from nestwell.schemas.grocery_list import GroceryListQuery
from nestwell.schemas.meal_plan import MealPlanQuery
from nestwell.schemas.recipe import RecipeQuery
from nestwell.schemas.task import TaskQuery


# ─── coerce_query_params ─────────────────────────────────────────

def test_repeated_key_keeps_last_value():
    params = QueryParams("status=pending&status=completed")
    assert coerce_query_params(params) == {"status": "completed"}


def test_empty_value_is_absent():
    params = QueryParams("coupleId=c1&assignedTo=")
    assert coerce_query_params(params) == {"coupleId": "c1"}


def test_plain_mapping_is_accepted():
    assert coerce_query_params({"limit": "10"}) == {"limit": "10"}


def test_coerced_pagination_strings_validate_as_ints():
    raw = coerce_query_params(QueryParams("coupleId=c1&limit=10&offset=20"))
    outcome = validate(TaskQuery, raw)
    assert outcome.value["limit"] == 10
    assert outcome.value["offset"] == 20


def test_limit_out_of_range_is_rejected():
    outcome = validate(TaskQuery, {"coupleId": "c1", "limit": "500"})
    assert outcome.paths == ["limit"]
    assert outcome.errors[0].message == "Limit must be at most 100"


# ─── Sentinel handling ───────────────────────────────────────────

def test_all_sentinel_and_absence_build_the_same_filter():
    with_all = validate(TaskQuery, {"coupleId": "c1", "status": "all"}).value
    absent = validate(TaskQuery, {"coupleId": "c1"}).value
    assert build_filter("task", with_all) == build_filter("task", absent)
    assert build_filter("task", absent).clauses == (Equals("couple_id", "c1"),)


def test_grocery_query_with_all_filters_adds_no_clauses():
    raw = {"coupleId": "c1", "status": "all", "assignedTo": "all"}
    outcome = validate(GroceryListQuery, raw)
    assert outcome.is_valid
    f = build_filter("grocery_list", outcome.value)
    assert f.clauses == (Equals("couple_id", "c1"),)


def test_concrete_values_become_equality_clauses():
    raw = {"coupleId": "c1", "status": "pending", "assignedTo": "partner_b"}
    f = build_filter("grocery_list", validate(GroceryListQuery, raw).value)
    assert set(f.clauses) == {
        Equals("couple_id", "c1"),
        Equals("status", "pending"),
        Equals("assigned_to", "partner_b"),
    }


def test_invalid_status_is_rejected():
    outcome = validate(TaskQuery, {"coupleId": "c1", "status": "done"})
    assert outcome.paths == ["status"]


# ─── Entity-specific clauses ─────────────────────────────────────

def test_recipe_is_favorite_true_filters():
    f = build_filter("recipe", validate(RecipeQuery, {"isFavorite": "true"}).value)
    assert f.clauses == (Equals("is_favorite", True),)


def test_recipe_is_favorite_false_does_not_filter():
    f = build_filter("recipe", validate(RecipeQuery, {"isFavorite": "false"}).value)
    assert f.clauses == ()


def test_meal_plan_range_needs_both_bounds():
    start_only = validate(
        MealPlanQuery, {"coupleId": "c1", "startDate": "2026-01-01"},
    ).value
    assert build_filter("meal_plan", start_only).clauses == (Equals("couple_id", "c1"),)

    both = validate(MealPlanQuery, {
        "coupleId": "c1", "startDate": "2026-01-01", "endDate": "2026-01-07",
    }).value
    clauses = build_filter("meal_plan", both).clauses
    assert Between("date", datetime(2026, 1, 1), datetime(2026, 1, 7)) in clauses


def test_filter_carries_pagination():
    f = build_filter("task", {"couple_id": "c1", "limit": 5, "offset": 10})
    assert (f.limit, f.offset) == (5, 10)


# ─── Tags ────────────────────────────────────────────────────────

def test_split_tags_trims_and_drops_empties():
    assert split_tags(" beach, ,sunset ,") == ("beach", "sunset")
    assert split_tags(None) == ()
    assert split_tags("") == ()


def test_tags_ride_on_the_filter():
    f = build_filter("memory", {"couple_id": "c1", "tags": "beach,home"})
    assert f.tags == ("beach", "home")
    assert f.has_tag_filter


def test_apply_tag_filter_keeps_any_intersection():
    rows = [
        {"id": 1, "tags": ["beach", "summer"]},
        {"id": 2, "tags": ["home"]},
        {"id": 3, "tags": []},
    ]
    assert [r["id"] for r in apply_tag_filter(rows, ("summer", "winter"))] == [1]
    assert apply_tag_filter(rows, ()) == rows


def test_empty_filter_has_no_tag_filter():
    assert not Filter().has_tag_filter
