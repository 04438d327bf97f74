from __future__ import annotations

import logging
from datetime import date
from time import perf_counter
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from fishpoles.api.common import parse_month_param
from fishpoles.dashboard.aggregator import compute_dashboard
from fishpoles.dashboard.store import DashboardStore
from fishpoles.deps import get_db, get_today
from fishpoles.schemas.dashboard import DashboardReport

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

logger = logging.getLogger(__name__)


@router.get("", response_model=DashboardReport)
def dashboard(
    request: Request,
    holding_account_id: str | None = Query(None),
    month: str | None = Query(None, description="YYYY-MM"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    # validação na borda: o agregador assume entrada válida
    if not holding_account_id or not month:
        raise HTTPException(status_code=400, detail={
            "error_code": "MISSING_PARAMS",
            "message": "holding_account_id and month required",
        })
    ym = parse_month_param(month)

    request_id = request.headers.get("x-request-id") or uuid4().hex
    t0 = perf_counter()

    inputs = DashboardStore(db).load_month(holding_account_id, ym)
    report = compute_dashboard(inputs.companies, inputs.profit_centers, inputs.transactions, ym, today)

    duration_ms = int((perf_counter() - t0) * 1000)
    logger.info(
        "dashboard ok request_id=%s holding_account_id=%s month=%s companies=%s profit_centers=%s transactions=%s duration_ms=%s",
        request_id, holding_account_id, report.month, len(inputs.companies), len(inputs.profit_centers),
        len(inputs.transactions), duration_ms,
    )
    return report
