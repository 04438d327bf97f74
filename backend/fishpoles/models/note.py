from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fishpoles.db import Base, new_id, utcnow


class NoteEntry(Base):
    __tablename__ = "note_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    profit_center_id: Mapped[str] = mapped_column(ForeignKey("profit_centers.id"), index=True)
    text: Mapped[str] = mapped_column(Text)
    created_by: Mapped[str] = mapped_column(String(200), default="user")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
