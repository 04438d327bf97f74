import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session
from sqlalchemy import select, func

from fishpoles.api.common import apply_changes, ensure_company, ensure_profit_center, not_found
from fishpoles.dashboard.store import DashboardStore
from fishpoles.deps import get_db
from fishpoles.models.profit_center import ProfitCenter
from fishpoles.schemas.common import ReorderRequest, SuccessOut
from fishpoles.schemas.profit_center import ProfitCenterCreate, ProfitCenterOut, ProfitCenterUpdate

router = APIRouter(prefix="/profit-centers", tags=["profit-centers"])

logger = logging.getLogger(__name__)


class ProjectionFlag(BaseModel):
    include_in_projection: bool


def _ensure_same_holding(company_holding_id: str, holding_account_id: str) -> None:
    if company_holding_id != holding_account_id:
        raise HTTPException(status_code=422, detail={
            "error_code": "COMPANY_HOLDING_MISMATCH",
            "message": "company belongs to another holding account",
        })


@router.get("", response_model=list[ProfitCenterOut])
def list_profit_centers(
    holding_account_id: str | None = Query(None),
    company_id: str | None = Query(None),
    db: Session = Depends(get_db),
):
    q = select(ProfitCenter).order_by(ProfitCenter.display_order, ProfitCenter.created_at)
    if holding_account_id:
        q = q.where(ProfitCenter.holding_account_id == holding_account_id)
    if company_id:
        q = q.where(ProfitCenter.company_id == company_id)
    return list(db.scalars(q))


@router.post("", response_model=ProfitCenterOut, status_code=201)
def create_profit_center(payload: ProfitCenterCreate, db: Session = Depends(get_db)):
    company = ensure_company(db, payload.company_id)
    _ensure_same_holding(company.holding_account_id, payload.holding_account_id)

    display_order = payload.display_order
    if display_order is None:
        display_order = db.scalar(
            select(func.count(ProfitCenter.id)).where(ProfitCenter.company_id == payload.company_id)
        ) or 0

    pc = ProfitCenter(
        holding_account_id=payload.holding_account_id,
        company_id=payload.company_id,
        name=payload.name,
        display_order=display_order,
        active=True,
        include_in_projection=payload.include_in_projection,
    )
    db.add(pc)
    db.commit()
    db.refresh(pc)
    return pc


@router.post("/reorder", response_model=SuccessOut)
def reorder_profit_centers(payload: ReorderRequest, db: Session = Depends(get_db)):
    rows = {pc.id: pc for pc in db.scalars(select(ProfitCenter).where(ProfitCenter.id.in_(payload.order)))}
    missing = [pid for pid in payload.order if pid not in rows]
    if missing:
        logger.warning("reorder profit centers: ids ignorados=%s", missing)
    for index, pc_id in enumerate(payload.order):
        pc = rows.get(pc_id)
        if pc is not None:
            pc.display_order = index
    db.commit()
    return SuccessOut()


@router.get("/{profit_center_id}", response_model=ProfitCenterOut)
def get_profit_center(profit_center_id: str, db: Session = Depends(get_db)):
    return ensure_profit_center(db, profit_center_id)


@router.put("/{profit_center_id}", response_model=ProfitCenterOut)
def update_profit_center(profit_center_id: str, payload: ProfitCenterUpdate, db: Session = Depends(get_db)):
    pc = ensure_profit_center(db, profit_center_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if changes.get("company_id"):
        company = ensure_company(db, changes["company_id"])
        _ensure_same_holding(company.holding_account_id, pc.holding_account_id)
    apply_changes(pc, changes)
    db.commit()
    db.refresh(pc)
    return pc


@router.delete("/{profit_center_id}", response_model=SuccessOut)
def delete_profit_center(profit_center_id: str, db: Session = Depends(get_db)):
    pc = ensure_profit_center(db, profit_center_id)
    pc.active = False
    db.commit()
    return SuccessOut()


@router.get("/{profit_center_id}/projection", response_model=ProjectionFlag)
def get_projection_flag(profit_center_id: str, db: Session = Depends(get_db)):
    value = DashboardStore(db).get_include_in_projection(profit_center_id)
    if value is None:
        raise not_found("Profit center", profit_center_id, "PROFIT_CENTER_NOT_FOUND")
    return ProjectionFlag(include_in_projection=value)


@router.put("/{profit_center_id}/projection", response_model=ProjectionFlag)
def set_projection_flag(profit_center_id: str, payload: ProjectionFlag, db: Session = Depends(get_db)):
    pc = DashboardStore(db).set_include_in_projection(profit_center_id, payload.include_in_projection)
    if pc is None:
        raise not_found("Profit center", profit_center_id, "PROFIT_CENTER_NOT_FOUND")
    logger.info("profit_center=%s include_in_projection=%s", profit_center_id, pc.include_in_projection)
    return ProjectionFlag(include_in_projection=bool(pc.include_in_projection))
