"""create_activities_table

Revision ID: c52f7e0d9a84
Revises: 8d4e2b6a1c37
Create Date: 2026-03-02 10:17:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "c52f7e0d9a84"
down_revision = "8d4e2b6a1c37"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activities",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column(
            "category",
            sa.String(length=50),
            nullable=False,
            comment="Stored category (food, transport, energy, waste, diet, recycling)",
        ),
        sa.Column(
            "type",
            sa.String(length=100),
            nullable=False,
            comment="Subcategory or mode (e.g., 'Red Meat', 'Bus')",
        ),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column(
            "unit", sa.String(length=20), nullable=False, comment="kg, km, kWh, meal or item"
        ),
        sa.Column(
            "emission_kg",
            sa.Float(),
            nullable=False,
            comment="Calculated emissions in kg CO2e",
        ),
        sa.Column(
            "factor_key",
            sa.String(length=100),
            nullable=False,
            comment="Emission factor key used for the calculation",
        ),
        sa.Column(
            "meta", sa.JSON(), nullable=True, comment="Submitted category payload"
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        comment="Logged carbon activities",
    )
    op.create_index(
        op.f("ix_activities_user_id"), "activities", ["user_id"], unique=False
    )
    op.create_index(
        "ix_activities_user_created",
        "activities",
        ["user_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_activities_user_created", table_name="activities")
    op.drop_index(op.f("ix_activities_user_id"), table_name="activities")
    op.drop_table("activities")
