"""create_emission_factors_table

Revision ID: 8d4e2b6a1c37
Revises: 3f1a9c2e7b10
Create Date: 2026-03-02 10:16:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "8d4e2b6a1c37"
down_revision = "3f1a9c2e7b10"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "emission_factors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "key",
            sa.String(length=100),
            nullable=False,
            comment="Factor key (e.g., 'transport.bus.km')",
        ),
        sa.Column(
            "unit",
            sa.String(length=20),
            nullable=False,
            comment="Unit of measurement (kg, km, kWh, meal, item)",
        ),
        sa.Column(
            "co2e_factor",
            sa.Numeric(precision=10, scale=6),
            nullable=False,
            comment="kg CO2e per unit",
        ),
        sa.Column(
            "source",
            sa.String(length=200),
            nullable=True,
            comment="Source of the emission factor",
        ),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        comment="Emission factor overrides for CO2e calculations",
    )
    op.create_index(
        op.f("ix_emission_factors_key"), "emission_factors", ["key"], unique=True
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_emission_factors_key"), table_name="emission_factors")
    op.drop_table("emission_factors")
