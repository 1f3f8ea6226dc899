"""SQLAlchemy ORM model for the alerts table."""

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, Integer, Text, func, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from proxmon.models.server import Base


class Alert(Base):
    __tablename__ = "alerts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    server_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    vm_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    type: Mapped[str] = mapped_column(
        Text,
        CheckConstraint("type IN ('warning', 'critical', 'info')", name="ck_alerts_type"),
        nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=True
    )
    acknowledged: Mapped[bool] = mapped_column(
        Boolean, server_default=text("false"), nullable=False
    )
