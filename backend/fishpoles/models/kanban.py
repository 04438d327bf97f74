from datetime import datetime

from sqlalchemy import String, Integer, Boolean, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class KanbanColumn(Base):
    __tablename__ = "kanban_columns"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    title: Mapped[str] = mapped_column(String(120))
    color: Mapped[str] = mapped_column(String(16), default="#6b7280")
    display_order: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class KanbanCard(Base):
    __tablename__ = "kanban_cards"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    column_id: Mapped[str] = mapped_column(ForeignKey("kanban_columns.id"), index=True)
    profit_center_id: Mapped[str | None] = mapped_column(ForeignKey("profit_centers.id"), nullable=True, index=True)
    company_id: Mapped[str | None] = mapped_column(ForeignKey("companies.id"), nullable=True, index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    amount_cents: Mapped[int | None] = mapped_column(Integer, nullable=True)
    due_date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    # "low" | "medium" | "high"
    priority: Mapped[str] = mapped_column(String(8), default="medium")
    display_order: Mapped[int] = mapped_column(Integer, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
