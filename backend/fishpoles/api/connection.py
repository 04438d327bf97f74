import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import ensure_holding_account, ensure_profit_center
from fishpoles.deps import get_db
from fishpoles.models.connection import FinancialConnection, MappingRule
from fishpoles.providers.base import ProviderNotImplementedError, UnknownProviderError
from fishpoles.providers.normalization import (
    MATCH_TYPES,
    PROVIDERS,
    apply_mapping_rules,
    get_provider,
    get_provider_info,
    normalize_raw_event,
)
from fishpoles.schemas.connection import ConnectionCreate, ConnectionOut, MappingRuleCreate, MappingRuleOut, ProviderInfo

router = APIRouter(tags=["connections"])

logger = logging.getLogger(__name__)


def _ensure_provider(name: str) -> str:
    try:
        return get_provider(name).PROVIDER_NAME
    except UnknownProviderError as e:
        raise HTTPException(status_code=422, detail={
            "error_code": "UNKNOWN_PROVIDER",
            "message": str(e),
            "expected": sorted(PROVIDERS),
        })


@router.get("/providers", response_model=list[ProviderInfo])
def list_providers():
    return [ProviderInfo(id=name, **get_provider_info(name)) for name in PROVIDERS]


@router.post("/providers/{provider}/normalize")
def normalize_provider_event(
    provider: str,
    holding_account_id: str = Query(...),
    raw_event: dict[str, Any] = Body(...),
):
    name = _ensure_provider(provider)
    try:
        return normalize_raw_event(name, raw_event, holding_account_id)
    except ProviderNotImplementedError as e:
        logger.info("normalize stub provider=%s holding_account_id=%s", name, holding_account_id)
        raise HTTPException(status_code=501, detail={
            "error_code": "PROVIDER_NOT_IMPLEMENTED",
            "message": str(e),
            "provider": name,
        })


@router.get("/connections", response_model=list[ConnectionOut])
def list_connections(holding_account_id: str | None = Query(None), db: Session = Depends(get_db)):
    q = select(FinancialConnection).order_by(FinancialConnection.created_at)
    if holding_account_id:
        q = q.where(FinancialConnection.holding_account_id == holding_account_id)
    return list(db.scalars(q))


@router.post("/connections", response_model=ConnectionOut, status_code=201)
def create_connection(payload: ConnectionCreate, db: Session = Depends(get_db)):
    provider = _ensure_provider(payload.provider)
    ensure_holding_account(db, payload.holding_account_id)
    conn = FinancialConnection(
        holding_account_id=payload.holding_account_id,
        provider=provider,
        status="disconnected",
        external_account_id=None,
        meta={},
        last_synced_at=None,
    )
    db.add(conn)
    db.commit()
    db.refresh(conn)
    return conn


@router.get("/mapping-rules", response_model=list[MappingRuleOut])
def list_mapping_rules(holding_account_id: str | None = Query(None), db: Session = Depends(get_db)):
    q = select(MappingRule).order_by(MappingRule.priority.desc(), MappingRule.created_at)
    if holding_account_id:
        q = q.where(MappingRule.holding_account_id == holding_account_id)
    return list(db.scalars(q))


@router.post("/mapping-rules", response_model=MappingRuleOut, status_code=201)
def create_mapping_rule(payload: MappingRuleCreate, db: Session = Depends(get_db)):
    provider = _ensure_provider(payload.provider)
    if payload.match_type not in MATCH_TYPES:
        raise HTTPException(status_code=422, detail={
            "error_code": "INVALID_MATCH_TYPE",
            "message": "match_type inválido",
            "value": payload.match_type,
            "expected": list(MATCH_TYPES),
        })
    ensure_profit_center(db, payload.profit_center_id)

    rule = MappingRule(
        holding_account_id=payload.holding_account_id,
        provider=provider,
        match_type=payload.match_type,
        match_value=payload.match_value,
        profit_center_id=payload.profit_center_id,
        priority=payload.priority,
        active=True,
    )
    db.add(rule)
    db.commit()
    db.refresh(rule)
    return rule


@router.post("/mapping-rules/resolve")
def resolve_mapping(
    holding_account_id: str = Query(...),
    provider: str | None = Query(None),
    transaction: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """Simula o roteamento: qual profit center as regras ativas dariam para esta transação."""
    q = select(MappingRule).where(MappingRule.holding_account_id == holding_account_id)
    if provider:
        q = q.where(MappingRule.provider == _ensure_provider(provider))
    profit_center_id = apply_mapping_rules(transaction, db.scalars(q))
    return {"profit_center_id": profit_center_id, "matched": profit_center_id is not None}
