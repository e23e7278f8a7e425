"""ScheduledActivity ORM — an activity template scheduled for one child.

Invariants:
    - status in ActivityStatus; completed_at set iff status == COMPLETED
    - Completing an activity creates a StorybookEntry in the same transaction
      (infrastructure/activity_store.py)
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from nestwell.db.base import Base


class ScheduledActivity(Base):
    __tablename__ = "scheduled_activities"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    child_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("children.id", ondelete="CASCADE"),
        nullable=False,
    )
    activity_template_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("activity_templates.id"), nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="PENDING",
    )
    scheduled_for: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    child: Mapped["Child"] = relationship(
        "Child", back_populates="scheduled_activities",
    )
    activity_template: Mapped["ActivityTemplate"] = relationship(
        "ActivityTemplate", lazy="selectin",
    )
