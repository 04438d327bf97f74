from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict


class RockCreate(BaseModel):
    holding_account_id: str
    title: str = Field(min_length=1, max_length=200)
    description: str = ""
    profit_center_id: str | None = None
    company_id: str | None = None
    owner: str | None = Field(default=None, max_length=200)
    due_date: date | None = None


class RockUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    owner: str | None = Field(default=None, max_length=200)
    due_date: date | None = None
    status: Literal["active", "completed"] | None = None


class RockOut(BaseModel):
    id: str
    holding_account_id: str
    profit_center_id: str | None = None
    company_id: str | None = None
    title: str
    description: str = ""
    owner: str | None = None
    due_date: date | None = None
    status: str
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
