from __future__ import annotations

from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from fishpoles.dashboard.aggregator import YearMonth, days_in_month, month_label
from fishpoles.models.company import Company
from fishpoles.models.profit_center import ProfitCenter
from fishpoles.models.transaction import Transaction
from fishpoles.schemas.company import CompanyOut
from fishpoles.schemas.profit_center import ProfitCenterOut
from fishpoles.schemas.transaction import TransactionOut


class MonthInputs(NamedTuple):
    companies: list[CompanyOut]
    profit_centers: list[ProfitCenterOut]
    transactions: list[TransactionOut]


def month_bounds(month: YearMonth) -> tuple[str, str]:
    """("YYYY-MM-01", "YYYY-MM-<último dia>"), limites inclusivos."""
    label = month_label(month)
    return f"{label}-01", f"{label}-{days_in_month(*month):02d}"


class DashboardStore:
    """Leituras que alimentam o agregador do dashboard.

    Recebe a sessão pronta (um store por request); não abre nem fecha nada.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_active_companies(self, holding_account_id: str) -> list[Company]:
        q = (
            select(Company)
            .where(Company.holding_account_id == holding_account_id)
            .where(Company.active.is_not(False))
            .order_by(Company.display_order, Company.created_at)
        )
        return list(self.db.scalars(q))

    def list_active_profit_centers(self, holding_account_id: str) -> list[ProfitCenter]:
        q = (
            select(ProfitCenter)
            .where(ProfitCenter.holding_account_id == holding_account_id)
            .where(ProfitCenter.active.is_not(False))
            .order_by(ProfitCenter.display_order, ProfitCenter.created_at)
        )
        return list(self.db.scalars(q))

    def list_transactions_between(self, holding_account_id: str, start: str, end: str) -> list[Transaction]:
        # comparação de string: txn_date é YYYY-MM-DD
        q = (
            select(Transaction)
            .where(Transaction.holding_account_id == holding_account_id)
            .where(Transaction.txn_date >= start)
            .where(Transaction.txn_date <= end)
        )
        return list(self.db.scalars(q))

    def get_include_in_projection(self, profit_center_id: str) -> bool | None:
        pc = self.db.get(ProfitCenter, profit_center_id)
        if pc is None:
            return None
        return pc.include_in_projection is not False

    def set_include_in_projection(self, profit_center_id: str, value: bool) -> ProfitCenter | None:
        pc = self.db.get(ProfitCenter, profit_center_id)
        if pc is None:
            return None
        pc.include_in_projection = bool(value)
        self.db.commit()
        self.db.refresh(pc)
        return pc

    def load_month(self, holding_account_id: str, month: YearMonth) -> MonthInputs:
        start, end = month_bounds(month)
        return MonthInputs(
            companies=[CompanyOut.model_validate(c) for c in self.list_active_companies(holding_account_id)],
            profit_centers=[ProfitCenterOut.model_validate(pc) for pc in self.list_active_profit_centers(holding_account_id)],
            transactions=[
                TransactionOut.model_validate(t)
                for t in self.list_transactions_between(holding_account_id, start, end)
            ],
        )
