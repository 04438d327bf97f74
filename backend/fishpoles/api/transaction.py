from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import ensure_holding_account, ensure_profit_center, get_or_404, parse_month_param
from fishpoles.core.money import resolve_amount_cents
from fishpoles.dashboard.store import month_bounds
from fishpoles.deps import get_db
from fishpoles.models.profit_center import ProfitCenter
from fishpoles.models.transaction import Transaction
from fishpoles.schemas.common import SuccessOut
from fishpoles.schemas.transaction import TransactionCreate, TransactionOut, TransactionUpdate

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=list[TransactionOut])
def list_transactions(
    holding_account_id: str | None = Query(None),
    profit_center_id: str | None = Query(None),
    month: str | None = Query(None, description="YYYY-MM"),
    db: Session = Depends(get_db),
):
    q = select(Transaction).order_by(Transaction.txn_date.desc(), Transaction.created_at.desc())
    if holding_account_id:
        q = q.where(Transaction.holding_account_id == holding_account_id)
    if profit_center_id:
        q = q.where(Transaction.profit_center_id == profit_center_id)
    if month:
        start, end = month_bounds(parse_month_param(month))
        q = q.where(Transaction.txn_date >= start).where(Transaction.txn_date <= end)
    return list(db.scalars(q))

def _ensure_same_holding(pc: ProfitCenter, holding_account_id: str) -> None:
    if pc.holding_account_id != holding_account_id:
        raise HTTPException(status_code=422, detail={
            "error_code": "PROFIT_CENTER_HOLDING_MISMATCH",
            "message": "profit center belongs to another holding account",
        })


def _company_for(pc: ProfitCenter, company_id: str | None) -> str:
    # a empresa da transação é sempre a dona do profit center
    if company_id and company_id != pc.company_id:
        raise HTTPException(status_code=422, detail={
            "error_code": "COMPANY_PROFIT_CENTER_MISMATCH",
            "message": "company_id does not own the profit center",
            "expected": pc.company_id,
        })
    return pc.company_id


@router.post("", response_model=TransactionOut, status_code=201)
def create_transaction(payload: TransactionCreate, db: Session = Depends(get_db)):
    ensure_holding_account(db, payload.holding_account_id)
    pc = ensure_profit_center(db, payload.profit_center_id)
    _ensure_same_holding(pc, payload.holding_account_id)

    t = Transaction(
        holding_account_id=payload.holding_account_id,
        profit_center_id=pc.id,
        company_id=_company_for(pc, payload.company_id),
        txn_date=payload.txn_date.isoformat(),
        amount_cents=resolve_amount_cents(payload.amount_cents, payload.amount),
        currency=payload.currency.upper(),
        provider=payload.provider or "manual",
        external_id=payload.external_id,
        raw_event_id=payload.raw_event_id,
        description=payload.description or "",
        is_projected=payload.is_projected,
    )
    db.add(t)
    db.commit()
    db.refresh(t)
    return t


@router.put("/{transaction_id}", response_model=TransactionOut)
def update_transaction(transaction_id: str, payload: TransactionUpdate, db: Session = Depends(get_db)):
    t = get_or_404(db, Transaction, transaction_id, "Transaction", "TRANSACTION_NOT_FOUND")
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)

    # valida antes de mexer em qualquer campo
    if "profit_center_id" in changes or "company_id" in changes:
        pc = ensure_profit_center(db, changes.get("profit_center_id") or t.profit_center_id)
        _ensure_same_holding(pc, t.holding_account_id)
        t.company_id = _company_for(pc, changes.get("company_id"))
        t.profit_center_id = pc.id

    amount_cents = resolve_amount_cents(changes.pop("amount_cents", None), changes.pop("amount", None))
    if amount_cents is not None:
        t.amount_cents = amount_cents

    if "txn_date" in changes:
        t.txn_date = changes["txn_date"].isoformat()
    if "description" in changes:
        t.description = changes["description"]
    if "is_projected" in changes:
        t.is_projected = changes["is_projected"]

    db.commit()
    db.refresh(t)
    return t


@router.delete("/{transaction_id}", response_model=SuccessOut)
def delete_transaction(transaction_id: str, db: Session = Depends(get_db)):
    t = get_or_404(db, Transaction, transaction_id, "Transaction", "TRANSACTION_NOT_FOUND")
    db.delete(t)
    db.commit()
    return SuccessOut()
