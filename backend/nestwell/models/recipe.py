"""Recipe ORM — shared recipe book entry.

Invariants:
    - ingredients, tags, nutrition are canonical JSON in Text columns
    - nutrition is always present (zeroed macros when the client omits it)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from nestwell.db.base import Base


class Recipe(Base):
    __tablename__ = "recipes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    ingredients: Mapped[str] = mapped_column(Text, nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)
    prep_time: Mapped[float] = mapped_column(Float, nullable=False)
    cook_time: Mapped[float] = mapped_column(Float, nullable=False)
    servings: Mapped[float] = mapped_column(Float, nullable=False)
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False)
    cuisine: Mapped[str] = mapped_column(String(20), nullable=False)
    tags: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    nutrition: Mapped[str] = mapped_column(Text, nullable=False)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
