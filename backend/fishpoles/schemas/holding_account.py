from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class HoldingAccountCreate(BaseModel):
    name: str = Field(default="My Business", max_length=200)


class HoldingAccountUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=200)


class HoldingAccountOut(BaseModel):
    id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
