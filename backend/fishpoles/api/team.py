from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from fishpoles.api.common import ensure_holding_account, get_or_404
from fishpoles.deps import get_db
from fishpoles.models.team import TeamMember
from fishpoles.schemas.common import SuccessOut
from fishpoles.schemas.team import TeamMemberCreate, TeamMemberOut

router = APIRouter(prefix="/team", tags=["team"])


@router.get("", response_model=list[TeamMemberOut])
def list_team(holding_account_id: str = Query(...), db: Session = Depends(get_db)):
    q = select(TeamMember).where(TeamMember.holding_account_id == holding_account_id).order_by(TeamMember.created_at)
    return list(db.scalars(q))


@router.post("", response_model=TeamMemberOut, status_code=201)
def add_team_member(payload: TeamMemberCreate, db: Session = Depends(get_db)):
    ensure_holding_account(db, payload.holding_account_id)
    email = payload.email.strip().lower()
    exists = db.scalar(
        select(TeamMember)
        .where(TeamMember.holding_account_id == payload.holding_account_id)
        .where(TeamMember.email == email)
    )
    if exists:
        raise HTTPException(status_code=409, detail={
            "error_code": "TEAM_MEMBER_EXISTS",
            "message": "email already on this team",
            "email": email,
        })

    member = TeamMember(
        holding_account_id=payload.holding_account_id,
        email=email,
        name=(payload.name or "").strip() or email.split("@")[0],
        role=payload.role,
        status="active",
    )
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


@router.delete("/{member_id}", response_model=SuccessOut)
def remove_team_member(member_id: str, db: Session = Depends(get_db)):
    member = get_or_404(db, TeamMember, member_id, "Team member")
    db.delete(member)
    db.commit()
    return SuccessOut()
