"""
Create the shoes table.

Revision ID: 20250101_000000_create_shoes_table
Revises:
Create Date: 2025-01-01 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20250101_000000_create_shoes_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "shoes",
        sa.Column("shoe_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("is_trending", sa.Boolean(), nullable=False),
        sa.Column("is_sold_out", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("shoe_id", name="shoes_pkey"),
    )


def downgrade() -> None:
    op.drop_table("shoes")
