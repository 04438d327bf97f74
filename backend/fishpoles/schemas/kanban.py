from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict


class KanbanInitRequest(BaseModel):
    holding_account_id: str


class KanbanColumnCreate(BaseModel):
    holding_account_id: str
    title: str = Field(min_length=1, max_length=120)
    color: str = Field(default="#6b7280", max_length=16)


class KanbanColumnUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=120)
    color: str | None = Field(default=None, max_length=16)
    display_order: int | None = Field(default=None, ge=0)


class KanbanColumnOut(BaseModel):
    id: str
    holding_account_id: str
    title: str
    color: str
    display_order: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class KanbanCardCreate(BaseModel):
    holding_account_id: str
    column_id: str
    title: str = Field(min_length=1, max_length=200)
    profit_center_id: str | None = None
    company_id: str | None = None
    description: str = ""
    amount: Decimal | None = None
    due_date: date | None = None
    priority: Literal["low", "medium", "high"] = "medium"


class KanbanCardUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    amount: Decimal | None = None
    due_date: date | None = None
    priority: Literal["low", "medium", "high"] | None = None
    profit_center_id: str | None = None


class KanbanCardMove(BaseModel):
    card_id: str
    column_id: str
    new_order: int = Field(ge=0)


class KanbanCardOut(BaseModel):
    id: str
    holding_account_id: str
    column_id: str
    profit_center_id: str | None = None
    company_id: str | None = None
    title: str
    description: str = ""
    amount_cents: int | None = None
    due_date: date | None = None
    priority: str = "medium"
    display_order: int = 0
    completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
