from datetime import datetime
from typing import Any

from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class FinancialConnection(Base):
    __tablename__ = "financial_connections"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    provider: Mapped[str] = mapped_column(String(32))
    status: Mapped[str] = mapped_column(String(16), default="disconnected")
    external_account_id: Mapped[str | None] = mapped_column(String(200), nullable=True)
    # "metadata" é reservado no DeclarativeBase
    meta: Mapped[dict[str, Any]] = mapped_column("metadata", JSON, default=dict)
    last_synced_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)


class MappingRule(Base):
    __tablename__ = "mapping_rules"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    provider: Mapped[str] = mapped_column(String(32))
    match_type: Mapped[str] = mapped_column(String(16))
    match_value: Mapped[str] = mapped_column(String(200))
    profit_center_id: Mapped[str] = mapped_column(ForeignKey("profit_centers.id"))
    priority: Mapped[int] = mapped_column(Integer, default=0)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
