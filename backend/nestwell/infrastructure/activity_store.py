"""SQL Activity Store — scheduled parenting activities and their completion records.

Invariants:
    - Status update and StorybookEntry creation commit together or not at all
    - A StorybookEntry is created only on transition to COMPLETED
    - completed_at is set on COMPLETED and cleared for any other status
    - Callers pass an already-validated ActivityStatus

Design Decisions:
    - One session, one commit: SQLAlchemy's autobegun transaction covers both statements;
      DatabaseSessionManager rolls back on any failure before commit
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from nestwell.core.domain_types import ActivityStatus, CoupleId, EntityId
from nestwell.core.errors import ErrorContext, ResourceNotFoundError
from nestwell.models import ActivityTemplate, Child, ScheduledActivity, StorybookEntry

logger = logging.getLogger(__name__)


def _template_dict(template: ActivityTemplate) -> dict[str, Any]:
    return {
        "id": template.id,
        "title": template.title,
        "description": template.description,
        "category": template.category,
        "difficulty": template.difficulty,
        "estimated_time_mins": template.estimated_time_mins,
    }


def activity_to_dict(activity: ScheduledActivity) -> dict[str, Any]:
    return {
        "id": activity.id,
        "child_id": activity.child_id,
        "activity_template_id": activity.activity_template_id,
        "status": activity.status,
        "scheduled_for": activity.scheduled_for,
        "completed_at": activity.completed_at,
        "activity_template": _template_dict(activity.activity_template),
    }


class SqlActivityStore:
    """ActivityStore backed by one AsyncSession (one per request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_couple(self, couple_id: CoupleId) -> list[dict]:
        children = await self.db.execute(
            select(Child.id).where(Child.couple_id == couple_id),
        )
        child_ids = list(children.scalars().all())
        if not child_ids:
            return []
        result = await self.db.execute(
            select(ScheduledActivity)
            .where(ScheduledActivity.child_id.in_(child_ids))
            .options(selectinload(ScheduledActivity.activity_template))
            .order_by(ScheduledActivity.scheduled_for.asc())
            .execution_options(populate_existing=True),
        )
        return [activity_to_dict(a) for a in result.scalars().all()]

    async def update_status_and_maybe_create_completion(
        self, activity_id: EntityId, status: ActivityStatus,
    ) -> dict:
        status = ActivityStatus(status)
        activity = await self.db.get(
            ScheduledActivity, activity_id,
            options=[selectinload(ScheduledActivity.activity_template)],
            populate_existing=True,
        )
        if activity is None:
            raise ResourceNotFoundError(
                "Activity", str(activity_id),
                ErrorContext(entity="parenting_activity", resource_id=str(activity_id)),
            )

        completed = status is ActivityStatus.COMPLETED
        activity.status = status.value
        activity.completed_at = datetime.now(timezone.utc) if completed else None
        if completed:
            template = activity.activity_template
            self.db.add(StorybookEntry(
                child_id=activity.child_id,
                activity_type=template.category,
                completion_data={"title": template.title},
            ))
        await self.db.commit()

        logger.info(
            f"Activity {activity_id} -> {status.value}",
            extra={"activity_id": str(activity_id), "status": status.value},
        )
        return activity_to_dict(activity)
