"""Revision 0004: storage_info table

Per-server storage pools with used/total capacity (GB).

Revision ID: 0004
Revises: 0003
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0004"
down_revision = "0003"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "storage_info",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("server_id", sa.Integer(), nullable=False),
        sa.Column("storage", sa.Text(), nullable=False),
        sa.Column("used", sa.Float(), nullable=False),
        sa.Column("total", sa.Float(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_storage_info"),
    )
    op.create_index("ix_storage_info_server_id", "storage_info", ["server_id"])


def downgrade():
    op.drop_index("ix_storage_info_server_id", table_name="storage_info")
    op.drop_table("storage_info")
