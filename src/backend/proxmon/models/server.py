"""SQLAlchemy ORM model for the servers table."""

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, Float, Integer, Text, func, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Server(Base):
    __tablename__ = "servers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    host: Mapped[str] = mapped_column(Text, nullable=False)
    port: Mapped[int] = mapped_column(Integer, server_default=text("8006"), nullable=False)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        Text,
        CheckConstraint(
            "status IN ('online', 'warning', 'offline', 'maintenance')",
            name="ck_servers_status",
        ),
        nullable=False,
    )
    cpu_usage: Mapped[float] = mapped_column(Float, server_default=text("0"), nullable=False)
    memory_usage: Mapped[float] = mapped_column(Float, server_default=text("0"), nullable=False)
    memory_total: Mapped[float] = mapped_column(Float, server_default=text("0"), nullable=False)
    uptime: Mapped[int] = mapped_column(BigInteger, server_default=text("0"), nullable=False)
    vm_count: Mapped[int] = mapped_column(Integer, server_default=text("0"), nullable=False)
    lxc_count: Mapped[int] = mapped_column(Integer, server_default=text("0"), nullable=False)
    last_seen: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=True
    )
