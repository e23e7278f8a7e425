"""Domain Types — rich types that replace bare strings across the codebase.

Invariants:
    - Every valid enum state lives here; no raw string matching elsewhere
    - QUERY_SENTINEL ("all") is never a stored value, only a filter spelling

Design Decisions:
    - str Enums: serialize to JSON and bind to String columns without custom encoders
    - NewType for ids: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CoupleId = NewType("CoupleId", str)
EntityId = NewType("EntityId", UUID)


# ─── Registry Keys ───────────────────────────────────────────────

class EntityKind(str, Enum):
    """Entity kinds with registered create/update/query schemas."""
    GROCERY_LIST = "grocery_list"
    MEAL_PLAN = "meal_plan"
    MEMORY = "memory"
    RECIPE = "recipe"
    TASK = "task"
    PARENTING_ACTIVITY = "parenting_activity"


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    QUERY = "query"


class ColumnKind(str, Enum):
    """Composite columns persisted as JSON text."""
    ITEMS = "items"
    TAGS = "tags"
    INGREDIENTS = "ingredients"
    NUTRITION = "nutrition"
    MEALS = "meals"
    PARTNERS = "partners"
    AI_REASONING = "ai_reasoning"


# ─── Value Enums ─────────────────────────────────────────────────

QUERY_SENTINEL = "all"


class ProgressStatus(str, Enum):
    """Grocery list and task lifecycle."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Cuisine(str, Enum):
    ITALIAN = "italian"
    MEXICAN = "mexican"
    INDIAN = "indian"
    CHINESE = "chinese"
    AMERICAN = "american"
    MEDITERRANEAN = "mediterranean"
    FRENCH = "french"
    THAI = "thai"
    JAPANESE = "japanese"
    OTHER = "other"


class MemoryType(str, Enum):
    PHOTO = "photo"
    VIDEO = "video"
    TEXT = "text"
    MILESTONE = "milestone"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ActivityStatus(str, Enum):
    """Scheduled parenting activity states. COMPLETED triggers a storybook entry."""
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"
