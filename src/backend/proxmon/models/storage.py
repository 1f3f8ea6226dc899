"""SQLAlchemy ORM model for per-server storage usage."""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from proxmon.models.server import Base


class StorageInfo(Base):
    __tablename__ = "storage_info"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    server_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    storage: Mapped[str] = mapped_column(Text, nullable=False)
    used: Mapped[float] = mapped_column(Float, nullable=False)
    total: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
