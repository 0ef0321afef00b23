"""create_profiles_table

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-03-02 10:15:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2e7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "display_name",
            sa.String(length=100),
            nullable=True,
            comment="Public name; shown as 'Anon' when empty",
        ),
        sa.Column("avatar_url", sa.String(length=500), nullable=True),
        sa.Column(
            "total_points",
            sa.Integer(),
            nullable=True,
            comment="Points accrued from quests and activities",
        ),
        sa.Column(
            "state",
            sa.String(length=10),
            nullable=True,
            comment="Region tag (e.g., 'au-vic') used by the regional leaderboard",
        ),
        sa.Column(
            "is_private",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
            comment="Hide from other users' leaderboards",
        ),
        sa.Column("current_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "onboarding_completed",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        comment="User profiles for leaderboards and social features",
    )
    op.create_index(
        op.f("ix_profiles_display_name"), "profiles", ["display_name"], unique=False
    )
    op.create_index(op.f("ix_profiles_state"), "profiles", ["state"], unique=False)
    op.create_index(
        "ix_profiles_total_points", "profiles", ["total_points"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_profiles_total_points", table_name="profiles")
    op.drop_index(op.f("ix_profiles_state"), table_name="profiles")
    op.drop_index(op.f("ix_profiles_display_name"), table_name="profiles")
    op.drop_table("profiles")
