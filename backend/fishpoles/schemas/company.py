from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class CompanyCreate(BaseModel):
    holding_account_id: str
    name: str = Field(min_length=1, max_length=200)
    color: str = Field(default="#3b82f6", max_length=16)
    display_order: int | None = Field(default=None, ge=0)


class CompanyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    color: str | None = Field(default=None, max_length=16)
    display_order: int | None = Field(default=None, ge=0)
    active: bool | None = None


class CompanyOut(BaseModel):
    id: str
    holding_account_id: str
    name: str
    color: str
    display_order: int = 0
    active: bool | None = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
