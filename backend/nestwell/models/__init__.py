"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Composite values (items, tags, ingredients, nutrition, meals, partners,
      ai_reasoning) live in Text columns holding canonical JSON; only
      core/column_codec.py reads or writes them

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from nestwell.models.grocery_list import GroceryList  # noqa: F401
from nestwell.models.meal_plan import MealPlan  # noqa: F401
from nestwell.models.memory import Memory  # noqa: F401
from nestwell.models.recipe import Recipe  # noqa: F401
from nestwell.models.task import Task  # noqa: F401
from nestwell.models.reward_transaction import RewardTransaction  # noqa: F401
from nestwell.models.child import Child  # noqa: F401
from nestwell.models.activity_template import ActivityTemplate  # noqa: F401
from nestwell.models.scheduled_activity import ScheduledActivity  # noqa: F401
from nestwell.models.storybook_entry import StorybookEntry  # noqa: F401
