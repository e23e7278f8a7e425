"""Meal Plan Schemas — create/update bodies and date-range query.

Invariants:
    - meals and nutrition are nested objects persisted as JSON text columns
    - Nutrition macros are non-negative; fiber/sugar optional
    - Date range filter applies only when both startDate and endDate are given
"""

from pydantic import Field

from nestwell.core.field_rules import (
    bounded_int, non_negative_number, optional_datetime, optional_text,
    positive_number, required_datetime, required_text,
)
from nestwell.schemas.base import NestwellSchema, make_partial


class Meals(NestwellSchema):
    breakfast: optional_text("Breakfast") = None
    lunch: optional_text("Lunch") = None
    dinner: optional_text("Dinner") = None
    snacks: list[optional_text("Snack")] = Field(default_factory=list)


class MealPlanNutrition(NestwellSchema):
    calories: non_negative_number("Calories")
    protein: non_negative_number("Protein")
    carbs: non_negative_number("Carbs")
    fats: non_negative_number("Fats")
    fiber: non_negative_number("Fiber") = None
    sugar: non_negative_number("Sugar") = None


class MealPlanCreate(NestwellSchema):
    couple_id: required_text("Couple ID")
    name: required_text("Name", 255)
    date: required_datetime("Date")
    meals: Meals
    nutrition: MealPlanNutrition
    budget: positive_number("Budget")
    notes: optional_text("Notes", 1000) = None


MealPlanUpdate = make_partial(MealPlanCreate, "MealPlanUpdate")


class MealPlanQuery(NestwellSchema):
    couple_id: required_text("Couple ID")
    start_date: optional_datetime("Start date") = None
    end_date: optional_datetime("End date") = None
    limit: bounded_int("Limit", 1, 100) = Field(default=50)
    offset: bounded_int("Offset", 0) = Field(default=0)
