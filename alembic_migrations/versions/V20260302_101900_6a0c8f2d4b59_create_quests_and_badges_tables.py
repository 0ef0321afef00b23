"""create_quests_and_badges_tables

Revision ID: 6a0c8f2d4b59
Revises: 1e9b3d5f7a26
Create Date: 2026-03-02 10:19:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "6a0c8f2d4b59"
down_revision = "1e9b3d5f7a26"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "quests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=True),
        sa.Column("min_value", sa.Float(), nullable=True),
        sa.Column(
            "max_value",
            sa.Float(),
            nullable=True,
            comment="Progress target; reaching it completes the quest",
        ),
        sa.Column(
            "points_multiplier", sa.Float(), nullable=False, server_default="1.0"
        ),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        comment="Quest definitions",
    )
    op.create_index(op.f("ix_quests_active"), "quests", ["active"], unique=False)

    op.create_table(
        "user_quests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("quest_id", sa.Integer(), nullable=False),
        sa.Column("progress", sa.Float(), nullable=True),
        sa.Column(
            "completed", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("date_started", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["quest_id"], ["quests.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "quest_id", name="uq_user_quests_user_quest"),
        comment="Quest enrollments and progress",
    )
    op.create_index(
        op.f("ix_user_quests_user_id"), "user_quests", ["user_id"], unique=False
    )

    op.create_table(
        "badges",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("icon", sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )

    op.create_table(
        "user_badges",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("badge_id", sa.Integer(), nullable=False),
        sa.Column("awarded_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["badge_id"], ["badges.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_user_badges_user_id"), "user_badges", ["user_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_user_badges_user_id"), table_name="user_badges")
    op.drop_table("user_badges")
    op.drop_table("badges")
    op.drop_index(op.f("ix_user_quests_user_id"), table_name="user_quests")
    op.drop_table("user_quests")
    op.drop_index(op.f("ix_quests_active"), table_name="quests")
    op.drop_table("quests")
