from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class OverheadItem(Base):
    __tablename__ = "overhead_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    profit_center_id: Mapped[str] = mapped_column(ForeignKey("profit_centers.id"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    amount_cents: Mapped[int] = mapped_column(Integer)
    # "monthly" | "annual"
    frequency: Mapped[str] = mapped_column(String(16), default="monthly")
    note: Mapped[str] = mapped_column(String(500), default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
