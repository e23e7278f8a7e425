"""Parenting Activities — scheduled activities for a couple's children.

Invariants:
    - Listing requires coupleId; a couple without children gets []
    - PATCH validates the status before touching the database
    - Completing an activity writes its storybook entry in the same transaction
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from nestwell.api.dependencies import (
    get_activity_store, get_validator, read_json_body, read_query,
)
from nestwell.core.domain_types import ActivityStatus, CoupleId, EntityKind, Operation
from nestwell.core.repository_protocols import ActivityStore
from nestwell.core.validator import Validator

router = APIRouter(prefix="/api/v1/parenting-activities", tags=["parenting-activities"])

ENTITY = EntityKind.PARENTING_ACTIVITY


@router.get("")
async def list_parenting_activities(
    raw: dict = Depends(read_query),
    validator: Validator = Depends(get_validator),
    store: ActivityStore = Depends(get_activity_store),
):
    """Scheduled activities (with template) for every child of the couple, soonest first."""
    query = validator.parse(ENTITY, Operation.QUERY, raw)
    return await store.list_for_couple(CoupleId(query["couple_id"]))


@router.patch("/{activity_id}")
async def update_parenting_activity(
    activity_id: UUID,
    body=Depends(read_json_body),
    validator: Validator = Depends(get_validator),
    store: ActivityStore = Depends(get_activity_store),
):
    value = validator.parse(ENTITY, Operation.UPDATE, body)
    return await store.update_status_and_maybe_create_completion(
        activity_id, ActivityStatus(value["status"]),
    )
