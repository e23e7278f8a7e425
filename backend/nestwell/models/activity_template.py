"""ActivityTemplate ORM — reusable description of a kids' activity.

Design Decisions:
    - category is free text (e.g. HANUMAN_HELPER): the catalogue is curated content,
      not an enum the API validates
"""

import uuid

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from nestwell.db.base import Base


class ActivityTemplate(Base):
    __tablename__ = "activity_templates"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False, default="EASY")
    estimated_time_mins: Mapped[int] = mapped_column(Integer, nullable=False, default=15)
