from pydantic import BaseModel, Field


class SuccessOut(BaseModel):
    success: bool = True


class ReorderRequest(BaseModel):
    order: list[str] = Field(default_factory=list, description="ids na nova ordem")
