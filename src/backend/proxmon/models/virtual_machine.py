"""SQLAlchemy ORM model for Proxmox guests (QEMU VMs and LXC containers)."""

from sqlalchemy import BigInteger, CheckConstraint, Float, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from proxmon.models.server import Base


class VirtualMachine(Base):
    __tablename__ = "virtual_machines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Soft reference to servers.id, no FK so server deletes never cascade
    server_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    vmid: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(
        Text,
        CheckConstraint("type IN ('vm', 'lxc')", name="ck_virtual_machines_type"),
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        Text,
        CheckConstraint(
            "status IN ('running', 'stopped', 'warning')",
            name="ck_virtual_machines_status",
        ),
        nullable=False,
    )
    cpu_usage: Mapped[float] = mapped_column(Float, server_default=text("0"), nullable=False)
    memory_usage: Mapped[float] = mapped_column(Float, server_default=text("0"), nullable=False)
    memory_total: Mapped[float] = mapped_column(Float, server_default=text("0"), nullable=False)
    uptime: Mapped[int] = mapped_column(BigInteger, server_default=text("0"), nullable=False)
    node: Mapped[str | None] = mapped_column(Text, nullable=True)
