from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import apply_changes, ensure_profit_center, get_or_404
from fishpoles.core.money import resolve_amount_cents
from fishpoles.deps import get_db
from fishpoles.models.overhead import OverheadItem
from fishpoles.schemas.common import SuccessOut
from fishpoles.schemas.overhead import OverheadCreate, OverheadOut, OverheadUpdate

router = APIRouter(prefix="/overhead", tags=["overhead"])


@router.get("", response_model=list[OverheadOut])
def list_overhead(profit_center_id: str | None = Query(None), db: Session = Depends(get_db)):
    q = select(OverheadItem).order_by(OverheadItem.created_at.desc())
    if profit_center_id:
        q = q.where(OverheadItem.profit_center_id == profit_center_id)
    return list(db.scalars(q))


@router.post("", response_model=OverheadOut, status_code=201)
def create_overhead(payload: OverheadCreate, db: Session = Depends(get_db)):
    ensure_profit_center(db, payload.profit_center_id)
    item = OverheadItem(
        profit_center_id=payload.profit_center_id,
        name=payload.name,
        amount_cents=resolve_amount_cents(payload.amount_cents, payload.amount),
        frequency=payload.frequency,
        note=payload.note or "",
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=OverheadOut)
def update_overhead(item_id: str, payload: OverheadUpdate, db: Session = Depends(get_db)):
    item = get_or_404(db, OverheadItem, item_id, "Overhead item")
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    amount_cents = resolve_amount_cents(changes.pop("amount_cents", None), changes.pop("amount", None))
    if amount_cents is not None:
        item.amount_cents = amount_cents
    apply_changes(item, changes)
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=SuccessOut)
def delete_overhead(item_id: str, db: Session = Depends(get_db)):
    item = get_or_404(db, OverheadItem, item_id, "Overhead item")
    db.delete(item)
    db.commit()
    return SuccessOut()
