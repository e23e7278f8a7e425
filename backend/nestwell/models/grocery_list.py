"""GroceryList ORM — a shared shopping list with a budget.

Invariants:
    - items is canonical JSON text (array of item objects), never NULL
    - status starts at "pending"

Design Decisions:
    - couple_id is an opaque string scope, not a FK: couples live in the auth provider
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from nestwell.db.base import Base


class GroceryList(Base):
    __tablename__ = "grocery_lists"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    couple_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    items: Mapped[str] = mapped_column(Text, nullable=False)
    total_budget: Mapped[float] = mapped_column(Float, nullable=False)
    assigned_to: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending",
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
