"""Memory Schemas — journal entries (photo, video, text, milestone).

Invariants:
    - tags default to [] and isPrivate to False on create
    - sentiment is never client-supplied on create; it is derived from the text
    - coupleId, type and content are fixed after create; updates touch only the
      editable fields (title, description, tags, isPrivate)
    - tags query is a comma-separated string filtered after fetch
"""

from pydantic import Field

from nestwell.core.domain_types import MemoryType, Sentiment
from nestwell.core.field_rules import (
    bounded_int, flag, optional_text, required_text, sentinel_choice, tag_list,
)
from nestwell.schemas.base import NestwellSchema, make_partial


class MemoryCreate(NestwellSchema):
    couple_id: required_text("Couple ID")
    type: MemoryType
    content: required_text("Content", 10_000)
    title: required_text("Title", 255)
    description: optional_text("Description", 1000) = None
    tags: tag_list() = Field(default_factory=list)
    is_private: flag() = False


MEMORY_EDITABLE_FIELDS = ("title", "description", "tags", "is_private")

MemoryUpdate = make_partial(
    MemoryCreate, "MemoryUpdate", include=MEMORY_EDITABLE_FIELDS,
)


class MemoryQuery(NestwellSchema):
    couple_id: required_text("Couple ID")
    type: sentinel_choice(MemoryType) | None = None
    sentiment: sentinel_choice(Sentiment) | None = None
    tags: optional_text("Tags") = None
    limit: bounded_int("Limit", 1, 100) = Field(default=50)
    offset: bounded_int("Offset", 0) = Field(default=0)
