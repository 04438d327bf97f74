from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict


class TeamMemberCreate(BaseModel):
    holding_account_id: str
    email: str = Field(min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(default="", max_length=200)
    role: Literal["owner", "admin", "member"] = "member"


class TeamMemberOut(BaseModel):
    id: str
    holding_account_id: str
    email: str
    name: str
    role: str
    status: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
