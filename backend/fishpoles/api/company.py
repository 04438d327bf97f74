import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select, func

from fishpoles.api.common import apply_changes, ensure_company, ensure_holding_account
from fishpoles.deps import get_db
from fishpoles.models.company import Company
from fishpoles.schemas.common import ReorderRequest, SuccessOut
from fishpoles.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate

router = APIRouter(prefix="/companies", tags=["companies"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[CompanyOut])
def list_companies(holding_account_id: str | None = Query(None), db: Session = Depends(get_db)):
    q = select(Company).order_by(Company.display_order, Company.created_at)
    if holding_account_id:
        q = q.where(Company.holding_account_id == holding_account_id)
    return list(db.scalars(q))


@router.post("", response_model=CompanyOut, status_code=201)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)):
    ensure_holding_account(db, payload.holding_account_id)

    display_order = payload.display_order
    if display_order is None:
        # vai pro fim da lista
        display_order = db.scalar(
            select(func.count(Company.id)).where(Company.holding_account_id == payload.holding_account_id)
        ) or 0

    c = Company(
        holding_account_id=payload.holding_account_id,
        name=payload.name,
        color=payload.color,
        display_order=display_order,
        active=True,
    )
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


# precisa vir antes de /{company_id}
@router.post("/reorder", response_model=SuccessOut)
def reorder_companies(payload: ReorderRequest, db: Session = Depends(get_db)):
    rows = {c.id: c for c in db.scalars(select(Company).where(Company.id.in_(payload.order)))}
    missing = [cid for cid in payload.order if cid not in rows]
    if missing:
        logger.warning("reorder companies: ids ignorados=%s", missing)
    for index, company_id in enumerate(payload.order):
        c = rows.get(company_id)
        if c is not None:
            c.display_order = index
    db.commit()
    return SuccessOut()


@router.put("/{company_id}", response_model=CompanyOut)
def update_company(company_id: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    c = ensure_company(db, company_id)
    apply_changes(c, payload.model_dump(exclude_unset=True, exclude_none=True))
    db.commit()
    db.refresh(c)
    return c


@router.delete("/{company_id}", response_model=SuccessOut)
def delete_company(company_id: str, db: Session = Depends(get_db)):
    # soft delete: transações e profit centers continuam referenciando a empresa
    c = ensure_company(db, company_id)
    c.active = False
    db.commit()
    return SuccessOut()
