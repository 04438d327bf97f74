from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict, model_validator


class OverheadCreate(BaseModel):
    profit_center_id: str
    name: str = Field(min_length=1, max_length=200)
    amount_cents: int | None = None
    amount: Decimal | None = None
    frequency: Literal["monthly", "annual"] = "monthly"
    note: str = Field(default="", max_length=500)

    @model_validator(mode="after")
    def _amount_required(self):
        if self.amount_cents is None and self.amount is None:
            raise ValueError("amount_cents ou amount obrigatório")
        return self


class OverheadUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    amount_cents: int | None = None
    amount: Decimal | None = None
    frequency: Literal["monthly", "annual"] | None = None
    note: str | None = Field(default=None, max_length=500)


class OverheadOut(BaseModel):
    id: str
    profit_center_id: str
    name: str
    amount_cents: int
    frequency: str
    note: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
