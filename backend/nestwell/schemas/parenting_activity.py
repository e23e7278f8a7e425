"""Parenting Activity Schemas — status transition body and couple-scoped listing.

Invariants:
    - status must be a valid ActivityStatus before any write is requested
"""

from nestwell.core.domain_types import ActivityStatus
from nestwell.core.field_rules import required_text
from nestwell.schemas.base import NestwellSchema


class ActivityStatusUpdate(NestwellSchema):
    status: ActivityStatus


class ParentingActivityQuery(NestwellSchema):
    couple_id: required_text("Couple ID")
