from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, AliasChoices


class ConnectionCreate(BaseModel):
    holding_account_id: str
    provider: str


class ConnectionOut(BaseModel):
    id: str
    holding_account_id: str
    provider: str
    status: str
    external_account_id: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict, validation_alias=AliasChoices("meta", "metadata"))
    last_synced_at: datetime | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class MappingRuleCreate(BaseModel):
    holding_account_id: str
    provider: str
    match_type: str
    match_value: str = Field(min_length=1, max_length=200)
    profit_center_id: str
    priority: int = 0


class MappingRuleOut(BaseModel):
    id: str
    holding_account_id: str
    provider: str
    match_type: str
    match_value: str
    profit_center_id: str
    priority: int
    active: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProviderInfo(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    color: str
