from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class Rock(Base):
    """Meta trimestral ("rock") de um holding, opcionalmente ligada a um profit center."""

    __tablename__ = "rocks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    profit_center_id: Mapped[str | None] = mapped_column(ForeignKey("profit_centers.id"), nullable=True, index=True)
    company_id: Mapped[str | None] = mapped_column(ForeignKey("companies.id"), nullable=True, index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    owner: Mapped[str | None] = mapped_column(String(200), nullable=True)
    due_date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    # "active" | "completed"
    status: Mapped[str] = mapped_column(String(16), default="active", index=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
