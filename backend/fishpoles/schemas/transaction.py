from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, ConfigDict, model_validator


class TransactionCreate(BaseModel):
    holding_account_id: str
    profit_center_id: str
    # opcional: herdado do profit center quando ausente
    company_id: str | None = None
    txn_date: date
    # aceita centavos ou valor em dólar (arredondado p/ centavo)
    amount_cents: int | None = None
    amount: Decimal | None = None
    currency: str = Field(default="USD", min_length=3, max_length=3)
    provider: str = Field(default="manual", max_length=32)
    external_id: str | None = None
    raw_event_id: str | None = None
    description: str = Field(default="", max_length=500)
    is_projected: bool = False

    @model_validator(mode="after")
    def _amount_required(self):
        if self.amount_cents is None and self.amount is None:
            raise ValueError("amount_cents ou amount obrigatório")
        return self


class TransactionUpdate(BaseModel):
    profit_center_id: str | None = None
    company_id: str | None = None
    txn_date: date | None = None
    amount_cents: int | None = None
    amount: Decimal | None = None
    description: str | None = Field(default=None, max_length=500)
    is_projected: bool | None = None


class TransactionOut(BaseModel):
    id: str
    holding_account_id: str
    profit_center_id: str
    company_id: str
    txn_date: date
    amount_cents: int
    currency: str = "USD"
    is_projected: bool = False
    provider: str = "manual"
    external_id: str | None = None
    raw_event_id: str | None = None
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
