from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import ensure_holding_account
from fishpoles.deps import get_db
from fishpoles.models.holding_account import HoldingAccount
from fishpoles.schemas.holding_account import HoldingAccountCreate, HoldingAccountOut, HoldingAccountUpdate

router = APIRouter(prefix="/holding-accounts", tags=["holding-accounts"])


@router.get("", response_model=list[HoldingAccountOut])
def list_holding_accounts(db: Session = Depends(get_db)):
    return list(db.scalars(select(HoldingAccount).order_by(HoldingAccount.created_at)))


@router.post("", response_model=HoldingAccountOut, status_code=201)
def create_holding_account(payload: HoldingAccountCreate, db: Session = Depends(get_db)):
    account = HoldingAccount(name=(payload.name or "").strip() or "My Business")
    db.add(account)
    db.commit()
    db.refresh(account)
    return account


@router.get("/{holding_account_id}", response_model=HoldingAccountOut)
def get_holding_account(holding_account_id: str, db: Session = Depends(get_db)):
    return ensure_holding_account(db, holding_account_id)


@router.put("/{holding_account_id}", response_model=HoldingAccountOut)
def update_holding_account(holding_account_id: str, payload: HoldingAccountUpdate, db: Session = Depends(get_db)):
    account = ensure_holding_account(db, holding_account_id)
    account.name = payload.name
    db.commit()
    db.refresh(account)
    return account
