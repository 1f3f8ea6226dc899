"""Revision 0001: servers table

Creates the servers table holding registered Proxmox hosts and their last
reported resource usage. Status is one of online/warning/offline/maintenance.

Revision ID: 0001
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "servers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("host", sa.Text(), nullable=False),
        sa.Column("port", sa.Integer(), server_default=sa.text("8006"), nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column(
            "status",
            sa.Text(),
            sa.CheckConstraint(
                "status IN ('online', 'warning', 'offline', 'maintenance')",
                name="ck_servers_status",
            ),
            nullable=False,
        ),
        sa.Column("cpu_usage", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("memory_usage", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("memory_total", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("uptime", sa.BigInteger(), server_default=sa.text("0"), nullable=False),
        sa.Column("vm_count", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("lxc_count", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "last_seen",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_servers"),
    )
    op.create_index("ix_servers_status", "servers", ["status"])


def downgrade():
    op.drop_index("ix_servers_status", table_name="servers")
    op.drop_table("servers")
