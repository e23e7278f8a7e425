"""Initial schema — household entities, rewards, and parenting activities.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", UUID(as_uuid=True), primary_key=True)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False,
        server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "grocery_lists",
        _id(),
        sa.Column("couple_id", sa.String(64), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("items", sa.Text, nullable=False),
        sa.Column("total_budget", sa.Float, nullable=False),
        sa.Column("assigned_to", sa.String(100), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
    )

    op.create_table(
        "meal_plans",
        _id(),
        sa.Column("couple_id", sa.String(64), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("meals", sa.Text, nullable=False),
        sa.Column("nutrition", sa.Text, nullable=False),
        sa.Column("budget", sa.Float, nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "memories",
        _id(),
        sa.Column("couple_id", sa.String(64), nullable=False, index=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("tags", sa.Text, nullable=False, server_default="[]"),
        sa.Column("sentiment", sa.String(20), nullable=False, server_default="neutral"),
        sa.Column("partners", sa.Text, nullable=False, server_default="[]"),
        sa.Column("is_private", sa.Boolean, nullable=False, server_default="false"),
        _created_at(),
    )

    op.create_table(
        "recipes",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("ingredients", sa.Text, nullable=False),
        sa.Column("instructions", sa.Text, nullable=False),
        sa.Column("prep_time", sa.Float, nullable=False),
        sa.Column("cook_time", sa.Float, nullable=False),
        sa.Column("servings", sa.Float, nullable=False),
        sa.Column("difficulty", sa.String(20), nullable=False),
        sa.Column("cuisine", sa.String(20), nullable=False),
        sa.Column("tags", sa.Text, nullable=False, server_default="[]"),
        sa.Column("nutrition", sa.Text, nullable=False),
        sa.Column("is_favorite", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("image_url", sa.String(2048), nullable=True),
        _created_at(),
    )

    op.create_table(
        "tasks",
        _id(),
        sa.Column("couple_id", sa.String(64), nullable=False, index=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("assigned_to", sa.String(100), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("ai_reasoning", sa.Text, nullable=True),
        sa.Column("due_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
    )

    op.create_table(
        "reward_transactions",
        _id(),
        sa.Column("couple_id", sa.String(64), nullable=False, index=True),
        sa.Column("coins_earned", sa.Integer, nullable=False),
        sa.Column("activity", sa.String(300), nullable=False),
        _created_at(),
    )

    op.create_table(
        "children",
        _id(),
        sa.Column("couple_id", sa.String(64), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        _created_at(),
    )

    op.create_table(
        "activity_templates",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("difficulty", sa.String(20), nullable=False, server_default="EASY"),
        sa.Column("estimated_time_mins", sa.Integer, nullable=False, server_default="15"),
    )

    op.create_table(
        "scheduled_activities",
        _id(),
        sa.Column(
            "child_id", UUID(as_uuid=True),
            sa.ForeignKey("children.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "activity_template_id", UUID(as_uuid=True),
            sa.ForeignKey("activity_templates.id"), nullable=False,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("scheduled_for", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "storybook_entries",
        _id(),
        sa.Column(
            "child_id", UUID(as_uuid=True),
            sa.ForeignKey("children.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("activity_type", sa.String(50), nullable=False),
        sa.Column("completion_data", sa.JSON, nullable=False),
        _created_at(),
    )


def downgrade() -> None:
    op.drop_table("storybook_entries")
    op.drop_table("scheduled_activities")
    op.drop_table("activity_templates")
    op.drop_table("children")
    op.drop_table("reward_transactions")
    op.drop_table("tasks")
    op.drop_table("recipes")
    op.drop_table("memories")
    op.drop_table("meal_plans")
    op.drop_table("grocery_lists")
