from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class NoteCreate(BaseModel):
    profit_center_id: str
    text: str = Field(min_length=1)
    created_by: str = Field(default="user", max_length=200)


class NoteOut(BaseModel):
    id: str
    profit_center_id: str
    text: str
    created_by: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
