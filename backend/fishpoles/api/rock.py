from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import ensure_holding_account, ensure_profit_center, get_or_404
from fishpoles.db import utcnow
from fishpoles.deps import get_db
from fishpoles.models.rock import Rock
from fishpoles.schemas.common import SuccessOut
from fishpoles.schemas.rock import RockCreate, RockOut, RockUpdate

router = APIRouter(prefix="/rocks", tags=["rocks"])


@router.get("", response_model=list[RockOut])
def list_rocks(
    holding_account_id: str = Query(...),
    status: str | None = Query(None, pattern="^(active|completed)$"),
    profit_center_id: str | None = Query(None),
    company_id: str | None = Query(None),
    db: Session = Depends(get_db),
):
    q = select(Rock).where(Rock.holding_account_id == holding_account_id).order_by(Rock.due_date, Rock.created_at)
    if status:
        q = q.where(Rock.status == status)
    if profit_center_id:
        q = q.where(Rock.profit_center_id == profit_center_id)
    elif company_id:
        q = q.where(Rock.company_id == company_id)
    return list(db.scalars(q))


@router.post("", response_model=RockOut, status_code=201)
def create_rock(payload: RockCreate, db: Session = Depends(get_db)):
    ensure_holding_account(db, payload.holding_account_id)
    company_id = payload.company_id
    if payload.profit_center_id:
        company_id = ensure_profit_center(db, payload.profit_center_id).company_id

    rock = Rock(
        holding_account_id=payload.holding_account_id,
        profit_center_id=payload.profit_center_id,
        company_id=company_id,
        title=payload.title,
        description=payload.description or "",
        owner=payload.owner,
        due_date=payload.due_date.isoformat() if payload.due_date else None,
        status="active",
    )
    db.add(rock)
    db.commit()
    db.refresh(rock)
    return rock


@router.put("/{rock_id}", response_model=RockOut)
def update_rock(rock_id: str, payload: RockUpdate, db: Session = Depends(get_db)):
    rock = get_or_404(db, Rock, rock_id, "Rock")
    changes = payload.model_dump(exclude_unset=True)

    for field in ("title", "description"):
        if changes.get(field) is not None:
            setattr(rock, field, changes[field])
    if "owner" in changes:
        rock.owner = changes["owner"]
    if "due_date" in changes:
        rock.due_date = changes["due_date"].isoformat() if changes["due_date"] else None

    status = changes.get("status")
    if status == "completed" and rock.status != "completed":
        rock.status = "completed"
        rock.completed_at = utcnow()
    elif status == "active":
        rock.status = "active"
        rock.completed_at = None

    db.commit()
    db.refresh(rock)
    return rock


@router.delete("/{rock_id}", response_model=SuccessOut)
def delete_rock(rock_id: str, db: Session = Depends(get_db)):
    rock = get_or_404(db, Rock, rock_id, "Rock")
    db.delete(rock)
    db.commit()
    return SuccessOut()
