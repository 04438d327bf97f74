from datetime import datetime

from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class ProfitCenter(Base):
    __tablename__ = "profit_centers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    company_id: Mapped[str] = mapped_column(ForeignKey("companies.id"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    display_order: Mapped[int] = mapped_column(Integer, default=0)
    active: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)

    # NULL (linhas antigas) conta como incluído na projeção
    include_in_projection: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
