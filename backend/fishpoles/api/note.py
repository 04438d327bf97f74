from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import ensure_profit_center, get_or_404
from fishpoles.deps import get_db
from fishpoles.models.note import NoteEntry
from fishpoles.schemas.common import SuccessOut
from fishpoles.schemas.note import NoteCreate, NoteOut

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteOut])
def list_notes(profit_center_id: str | None = Query(None), db: Session = Depends(get_db)):
    q = select(NoteEntry).order_by(NoteEntry.created_at.desc())
    if profit_center_id:
        q = q.where(NoteEntry.profit_center_id == profit_center_id)
    return list(db.scalars(q))


@router.post("", response_model=NoteOut, status_code=201)
def create_note(payload: NoteCreate, db: Session = Depends(get_db)):
    ensure_profit_center(db, payload.profit_center_id)
    n = NoteEntry(profit_center_id=payload.profit_center_id, text=payload.text, created_by=payload.created_by or "user")
    db.add(n)
    db.commit()
    db.refresh(n)
    return n


@router.delete("/{note_id}", response_model=SuccessOut)
def delete_note(note_id: str, db: Session = Depends(get_db)):
    n = get_or_404(db, NoteEntry, note_id, "Note")
    db.delete(n)
    db.commit()
    return SuccessOut()
