from __future__ import annotations

from pydantic import BaseModel, Field

from fishpoles.schemas.company import CompanyOut
from fishpoles.schemas.profit_center import ProfitCenterOut


class DashboardProfitCenter(ProfitCenterOut):
    company_name: str
    company_color: str
    daily: dict[str, int] = Field(description="YYYY-MM-DD -> centavos realizados")
    daily_projected: dict[str, int] = Field(description="YYYY-MM-DD -> centavos projetados")
    mtd: int
    avg_daily: float
    projection: int


class DashboardCompany(CompanyOut):
    profit_centers: list[DashboardProfitCenter]


class DashboardReport(BaseModel):
    month: str = Field(description="YYYY-MM")
    days_in_month: int
    day_of_month: int
    is_current_month: bool
    companies: list[DashboardCompany]
    profit_centers: list[DashboardProfitCenter]
    daily_totals: dict[str, int]
    daily_projected_totals: dict[str, int]
    grand_mtd: int
    grand_projection: int
