"""Revision 0002: virtual_machines table

QEMU VMs and LXC containers per server. server_id is a plain integer with no
foreign key: deleting a server leaves its guests in place.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "virtual_machines",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("server_id", sa.Integer(), nullable=False),
        sa.Column("vmid", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "type",
            sa.Text(),
            sa.CheckConstraint("type IN ('vm', 'lxc')", name="ck_virtual_machines_type"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Text(),
            sa.CheckConstraint(
                "status IN ('running', 'stopped', 'warning')",
                name="ck_virtual_machines_status",
            ),
            nullable=False,
        ),
        sa.Column("cpu_usage", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("memory_usage", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("memory_total", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("uptime", sa.BigInteger(), server_default=sa.text("0"), nullable=False),
        sa.Column("node", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_virtual_machines"),
    )
    op.create_index("ix_virtual_machines_server_id", "virtual_machines", ["server_id"])


def downgrade():
    op.drop_index("ix_virtual_machines_server_id", table_name="virtual_machines")
    op.drop_table("virtual_machines")
