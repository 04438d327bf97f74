from datetime import datetime

from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class Transaction(Base):
    __tablename__ = "normalized_transactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)

    holding_account_id: Mapped[str] = mapped_column(ForeignKey("holding_accounts.id"), index=True)
    profit_center_id: Mapped[str] = mapped_column(ForeignKey("profit_centers.id"), index=True)
    company_id: Mapped[str] = mapped_column(ForeignKey("companies.id"), index=True)

    # YYYY-MM-DD: largura fixa, então ordem lexical == ordem cronológica
    txn_date: Mapped[str] = mapped_column(String(10), index=True)

    # valor em centavos (evita float); positivo = receita
    amount_cents: Mapped[int] = mapped_column(Integer)
    currency: Mapped[str] = mapped_column(String(3), default="USD")

    # true = esperado, ainda não realizado
    is_projected: Mapped[bool] = mapped_column(Boolean, default=False)

    provider: Mapped[str] = mapped_column(String(32), default="manual")
    external_id: Mapped[str | None] = mapped_column(String(200), nullable=True)
    raw_event_id: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str] = mapped_column(String(500), default="")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
