"""Revision 0003: alerts table

Alerts optionally point at a server and/or VM (soft references). The
partial index serves the "active alerts" query used by the dashboard.

Revision ID: 0003
Revises: 0002
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0003"
down_revision = "0002"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "alerts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("server_id", sa.Integer(), nullable=True),
        sa.Column("vm_id", sa.Integer(), nullable=True),
        sa.Column(
            "type",
            sa.Text(),
            sa.CheckConstraint("type IN ('warning', 'critical', 'info')", name="ck_alerts_type"),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "timestamp",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.Column(
            "acknowledged",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_alerts"),
    )
    op.create_index(
        "ix_alerts_active_timestamp",
        "alerts",
        ["timestamp"],
        postgresql_where=sa.text("NOT acknowledged"),
    )


def downgrade():
    op.drop_index("ix_alerts_active_timestamp", table_name="alerts")
    op.drop_table("alerts")
