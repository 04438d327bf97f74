import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy import select, func

from fishpoles.api.common import ensure_holding_account, ensure_profit_center, get_or_404
from fishpoles.core.money import dollars_to_cents
from fishpoles.db import utcnow
from fishpoles.deps import get_db
from fishpoles.models.kanban import KanbanCard, KanbanColumn
from fishpoles.schemas.common import SuccessOut
from fishpoles.schemas.kanban import (
    KanbanCardCreate,
    KanbanCardMove,
    KanbanCardOut,
    KanbanCardUpdate,
    KanbanColumnCreate,
    KanbanColumnOut,
    KanbanColumnUpdate,
    KanbanInitRequest,
)

router = APIRouter(prefix="/kanban", tags=["kanban"])

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = (
    ("To Do", "#6b7280"),
    ("In Progress", "#3b82f6"),
    ("Done", "#22c55e"),
)


def _columns(db: Session, holding_account_id: str) -> list[KanbanColumn]:
    q = (
        select(KanbanColumn)
        .where(KanbanColumn.holding_account_id == holding_account_id)
        .order_by(KanbanColumn.display_order, KanbanColumn.created_at)
    )
    return list(db.scalars(q))


def _cards_in(db: Session, column_id: str) -> list[KanbanCard]:
    q = (
        select(KanbanCard)
        .where(KanbanCard.column_id == column_id)
        .order_by(KanbanCard.display_order, KanbanCard.created_at)
    )
    return list(db.scalars(q))


def _renumber(items) -> None:
    for index, item in enumerate(items):
        item.display_order = index


def _sync_completed(card: KanbanCard, columns: list[KanbanColumn]) -> None:
    # card na última coluna = concluído
    done = bool(columns) and card.column_id == columns[-1].id
    if done and not card.completed:
        card.completed = True
        card.completed_at = utcnow()
    elif not done and card.completed:
        card.completed = False
        card.completed_at = None


# -----------------------------
# Colunas
# -----------------------------

@router.post("/init", response_model=list[KanbanColumnOut])
def init_board(payload: KanbanInitRequest, db: Session = Depends(get_db)):
    """Cria as colunas padrão se o holding ainda não tem nenhuma (idempotente)."""
    ensure_holding_account(db, payload.holding_account_id)
    existing = _columns(db, payload.holding_account_id)
    if existing:
        return existing

    for index, (title, color) in enumerate(DEFAULT_COLUMNS):
        db.add(KanbanColumn(holding_account_id=payload.holding_account_id, title=title, color=color, display_order=index))
    db.commit()
    logger.info("kanban init holding_account_id=%s columns=%s", payload.holding_account_id, len(DEFAULT_COLUMNS))
    return _columns(db, payload.holding_account_id)


@router.get("/columns", response_model=list[KanbanColumnOut])
def list_columns(holding_account_id: str = Query(...), db: Session = Depends(get_db)):
    return _columns(db, holding_account_id)


@router.post("/columns", response_model=KanbanColumnOut, status_code=201)
def create_column(payload: KanbanColumnCreate, db: Session = Depends(get_db)):
    ensure_holding_account(db, payload.holding_account_id)
    count = db.scalar(
        select(func.count(KanbanColumn.id)).where(KanbanColumn.holding_account_id == payload.holding_account_id)
    ) or 0
    col = KanbanColumn(
        holding_account_id=payload.holding_account_id,
        title=payload.title,
        color=payload.color,
        display_order=count,
    )
    db.add(col)
    db.commit()
    db.refresh(col)
    return col


@router.put("/columns/{column_id}", response_model=KanbanColumnOut)
def update_column(column_id: str, payload: KanbanColumnUpdate, db: Session = Depends(get_db)):
    col = get_or_404(db, KanbanColumn, column_id, "Kanban column")
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "title" in changes:
        col.title = changes["title"]
    if "color" in changes:
        col.color = changes["color"]
    if "display_order" in changes:
        columns = [c for c in _columns(db, col.holding_account_id) if c.id != col.id]
        columns.insert(min(changes["display_order"], len(columns)), col)
        _renumber(columns)
    db.commit()
    db.refresh(col)
    return col


@router.delete("/columns/{column_id}", response_model=SuccessOut)
def delete_column(column_id: str, db: Session = Depends(get_db)):
    col = get_or_404(db, KanbanColumn, column_id, "Kanban column")
    columns = _columns(db, col.holding_account_id)
    if len(columns) <= 1:
        raise HTTPException(status_code=409, detail={
            "error_code": "LAST_COLUMN",
            "message": "cannot delete the only column",
        })

    idx = next(i for i, c in enumerate(columns) if c.id == col.id)
    target = columns[idx - 1] if idx > 0 else columns[idx + 1]

    # cards vão para o fim da coluna anterior (ou da próxima, se era a primeira)
    moved = _cards_in(db, col.id)
    offset = len(_cards_in(db, target.id))
    for index, card in enumerate(moved):
        card.column_id = target.id
        card.display_order = offset + index

    # cards saem antes da coluna ser apagada (FK)
    db.flush()

    remaining = [c for c in columns if c.id != col.id]
    db.delete(col)
    _renumber(remaining)
    # apagar a última coluna promove a anterior a "concluído"
    for card in {c.id: c for c in [*moved, *_cards_in(db, remaining[-1].id)]}.values():
        _sync_completed(card, remaining)
    db.commit()
    return SuccessOut()


# -----------------------------
# Cards
# -----------------------------

@router.get("/cards", response_model=list[KanbanCardOut])
def list_cards(
    holding_account_id: str = Query(...),
    profit_center_id: str | None = Query(None),
    company_id: str | None = Query(None),
    completed: bool | None = Query(None),
    db: Session = Depends(get_db),
):
    q = (
        select(KanbanCard)
        .where(KanbanCard.holding_account_id == holding_account_id)
        .order_by(KanbanCard.display_order, KanbanCard.created_at)
    )
    if profit_center_id:
        q = q.where(KanbanCard.profit_center_id == profit_center_id)
    elif company_id:
        q = q.where(KanbanCard.company_id == company_id)
    if completed is not None:
        q = q.where(KanbanCard.completed == completed)
    return list(db.scalars(q))


@router.post("/cards", response_model=KanbanCardOut, status_code=201)
def create_card(payload: KanbanCardCreate, db: Session = Depends(get_db)):
    col = get_or_404(db, KanbanColumn, payload.column_id, "Kanban column")
    if col.holding_account_id != payload.holding_account_id:
        raise HTTPException(status_code=422, detail={
            "error_code": "COLUMN_HOLDING_MISMATCH",
            "message": "column belongs to another holding account",
        })

    company_id = payload.company_id
    if payload.profit_center_id:
        company_id = ensure_profit_center(db, payload.profit_center_id).company_id

    card = KanbanCard(
        holding_account_id=payload.holding_account_id,
        column_id=col.id,
        profit_center_id=payload.profit_center_id,
        company_id=company_id,
        title=payload.title,
        description=payload.description or "",
        amount_cents=dollars_to_cents(payload.amount) if payload.amount is not None else None,
        due_date=payload.due_date.isoformat() if payload.due_date else None,
        priority=payload.priority,
        display_order=len(_cards_in(db, col.id)),
        completed=False,
    )
    _sync_completed(card, _columns(db, col.holding_account_id))
    db.add(card)
    db.commit()
    db.refresh(card)
    return card


# precisa vir antes de /cards/{card_id}
@router.post("/cards/move", response_model=KanbanCardOut)
def move_card(payload: KanbanCardMove, db: Session = Depends(get_db)):
    card = get_or_404(db, KanbanCard, payload.card_id, "Kanban card")
    target = get_or_404(db, KanbanColumn, payload.column_id, "Kanban column")
    if target.holding_account_id != card.holding_account_id:
        raise HTTPException(status_code=422, detail={
            "error_code": "COLUMN_HOLDING_MISMATCH",
            "message": "column belongs to another holding account",
        })

    source_id = card.column_id
    target_cards = [c for c in _cards_in(db, target.id) if c.id != card.id]
    target_cards.insert(min(payload.new_order, len(target_cards)), card)
    card.column_id = target.id
    _renumber(target_cards)

    if source_id != target.id:
        _renumber([c for c in _cards_in(db, source_id) if c.id != card.id])

    _sync_completed(card, _columns(db, card.holding_account_id))
    db.commit()
    db.refresh(card)
    return card


@router.put("/cards/{card_id}", response_model=KanbanCardOut)
def update_card(card_id: str, payload: KanbanCardUpdate, db: Session = Depends(get_db)):
    card = get_or_404(db, KanbanCard, card_id, "Kanban card")
    changes = payload.model_dump(exclude_unset=True)

    for field in ("title", "description", "priority"):
        if changes.get(field) is not None:
            setattr(card, field, changes[field])
    if "amount" in changes:
        card.amount_cents = dollars_to_cents(changes["amount"]) if changes["amount"] is not None else None
    if "due_date" in changes:
        card.due_date = changes["due_date"].isoformat() if changes["due_date"] else None
    if "profit_center_id" in changes:
        pc_id = changes["profit_center_id"]
        card.profit_center_id = pc_id
        card.company_id = ensure_profit_center(db, pc_id).company_id if pc_id else None

    db.commit()
    db.refresh(card)
    return card


@router.delete("/cards/{card_id}", response_model=SuccessOut)
def delete_card(card_id: str, db: Session = Depends(get_db)):
    card = get_or_404(db, KanbanCard, card_id, "Kanban card")
    column_id = card.column_id
    db.delete(card)
    db.flush()
    _renumber(_cards_in(db, column_id))
    db.commit()
    return SuccessOut()
