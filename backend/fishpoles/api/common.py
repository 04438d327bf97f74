import re
from typing import Any, TypeVar

from fastapi import HTTPException
from sqlalchemy.orm import Session

from fishpoles.dashboard.aggregator import YearMonth
from fishpoles.models.company import Company
from fishpoles.models.holding_account import HoldingAccount
from fishpoles.models.profit_center import ProfitCenter

M = TypeVar("M")


def not_found(entity: str, entity_id: str, error_code: str = "NOT_FOUND") -> HTTPException:
    return HTTPException(status_code=404, detail={
        "error_code": error_code,
        "message": f"{entity} not found",
        "id": entity_id,
    })


def get_or_404(db: Session, model: type[M], entity_id: str, entity: str, error_code: str = "NOT_FOUND") -> M:
    obj = db.get(model, entity_id)
    if obj is None:
        raise not_found(entity, entity_id, error_code)
    return obj


def ensure_holding_account(db: Session, holding_account_id: str) -> HoldingAccount:
    return get_or_404(db, HoldingAccount, holding_account_id, "Holding account", "HOLDING_ACCOUNT_NOT_FOUND")


def ensure_company(db: Session, company_id: str) -> Company:
    return get_or_404(db, Company, company_id, "Company", "COMPANY_NOT_FOUND")


def ensure_profit_center(db: Session, profit_center_id: str) -> ProfitCenter:
    return get_or_404(db, ProfitCenter, profit_center_id, "Profit center", "PROFIT_CENTER_NOT_FOUND")


def apply_changes(obj: Any, changes: dict[str, Any]) -> None:
    # PUT parcial: só os campos enviados (model_dump(exclude_unset=True))
    for field, value in changes.items():
        setattr(obj, field, value)


_MONTH_RE = re.compile(r"^([0-9]{4})-([0-9]{2})$")


def parse_month_param(raw: str) -> YearMonth:
    """Aceita só YYYY-MM (dígitos ASCII, mês 01-12); devolve (ano, mês) como inteiros."""
    m = _MONTH_RE.match((raw or "").strip())
    if m:
        year, month = int(m.group(1)), int(m.group(2))
        if 1 <= month <= 12 and year >= 1:
            return year, month
    raise HTTPException(status_code=400, detail={
        "error_code": "INVALID_MONTH",
        "message": "month must be YYYY-MM",
        "value": raw,
    })
