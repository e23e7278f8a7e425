"""Task Schemas — shared to-dos between partners.

Invariants:
    - status defaults to pending
    - aiReasoning is an opaque object persisted as JSON text (absent stays absent)
    - status, assignedTo and category filters treat "all" as no filter
"""

from typing import Any

from pydantic import Field

from nestwell.core.domain_types import ProgressStatus
from nestwell.core.field_rules import (
    bounded_int, optional_datetime, optional_text, required_text, sentinel_choice,
)
from nestwell.schemas.base import NestwellSchema, make_partial


class TaskCreate(NestwellSchema):
    couple_id: required_text("Couple ID")
    title: required_text("Title", 255)
    description: optional_text("Description", 1000) = None
    assigned_to: required_text("Assigned user")
    category: optional_text("Category", 50) = None
    status: ProgressStatus = ProgressStatus.PENDING
    ai_reasoning: dict[str, Any] = None
    due_at: optional_datetime("Due at") = None


TaskUpdate = make_partial(TaskCreate, "TaskUpdate")


class TaskQuery(NestwellSchema):
    couple_id: required_text("Couple ID")
    status: sentinel_choice(ProgressStatus) | None = None
    assigned_to: optional_text("Assigned user") = None
    category: optional_text("Category") = None
    limit: bounded_int("Limit", 1, 100) = Field(default=50)
    offset: bounded_int("Offset", 0) = Field(default=0)
