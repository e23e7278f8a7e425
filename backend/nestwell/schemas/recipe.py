"""Recipe Schemas — shared recipe book (not couple-scoped).

Invariants:
    - At least one ingredient; ingredient amount is free text ("1 1/2", "a pinch")
    - prepTime, cookTime, servings positive; nutrition optional, macros non-negative
    - tags default to [], isFavorite to False
"""

from typing import Literal

from pydantic import Field

from nestwell.core.domain_types import Cuisine, Difficulty
from nestwell.core.field_rules import (
    bounded_int, flag, non_empty_list, non_negative_number, optional_text,
    optional_url, positive_number, required_text, sentinel_choice, tag_list,
)
from nestwell.schemas.base import NestwellSchema, make_partial


class Ingredient(NestwellSchema):
    name: required_text("Ingredient name")
    amount: required_text("Amount")
    unit: optional_text("Unit") = None
    notes: optional_text("Notes") = None


class RecipeNutrition(NestwellSchema):
    calories: non_negative_number("Calories")
    protein: non_negative_number("Protein")
    carbs: non_negative_number("Carbs")
    fats: non_negative_number("Fats")


class RecipeCreate(NestwellSchema):
    name: required_text("Name", 255)
    description: optional_text("Description", 1000) = None
    ingredients: non_empty_list(Ingredient, "At least one ingredient is required")
    instructions: required_text("Instructions", 10_000)
    prep_time: positive_number("Prep time")
    cook_time: positive_number("Cook time")
    servings: positive_number("Servings")
    difficulty: Difficulty
    cuisine: Cuisine
    tags: tag_list() = Field(default_factory=list)
    nutrition: RecipeNutrition | None = None
    is_favorite: flag() = False
    image_url: optional_url("Image URL") = None


RecipeUpdate = make_partial(RecipeCreate, "RecipeUpdate")


class RecipeQuery(NestwellSchema):
    cuisine: sentinel_choice(Cuisine) | None = None
    difficulty: sentinel_choice(Difficulty) | None = None
    tags: optional_text("Tags") = None
    is_favorite: Literal["true", "false"] | None = None
    limit: bounded_int("Limit", 1, 100) = Field(default=50)
    offset: bounded_int("Offset", 0) = Field(default=0)
