from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class ProfitCenterCreate(BaseModel):
    holding_account_id: str
    company_id: str
    name: str = Field(min_length=1, max_length=200)
    display_order: int | None = Field(default=None, ge=0)
    include_in_projection: bool = True


class ProfitCenterUpdate(BaseModel):
    company_id: str | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    display_order: int | None = Field(default=None, ge=0)
    active: bool | None = None
    include_in_projection: bool | None = None


class ProfitCenterOut(BaseModel):
    id: str
    holding_account_id: str
    company_id: str
    name: str
    display_order: int = 0
    active: bool | None = True
    # None = linha antiga sem o campo -> incluído
    include_in_projection: bool | None = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
