"""Agregação mensal do dashboard.

Função pura: recebe as linhas já buscadas (empresas, profit centers e
transações do mês) e devolve o DashboardReport. Sem sessão, sem relógio:
"today" vem de quem chama.

Regras:
- transações projetadas (is_projected) nunca entram no mtd nem em daily_totals;
- mês corrente: mtd soma só dias 1..today.day e a projeção é o run-rate
  (média diária * dias do mês), arredondado uma única vez no final;
- mês passado: dia de referência = último dia, projeção == mtd;
- include_in_projection=False tira o profit center do grand_projection,
  mas a projeção individual continua sendo calculada.
"""

from __future__ import annotations

import calendar
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from fishpoles.schemas.company import CompanyOut
from fishpoles.schemas.dashboard import DashboardCompany, DashboardProfitCenter, DashboardReport
from fishpoles.schemas.profit_center import ProfitCenterOut
from fishpoles.schemas.transaction import TransactionOut

UNKNOWN_COMPANY_NAME = "Unknown"
UNKNOWN_COMPANY_COLOR = "#6b7280"

YearMonth = tuple[int, int]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_label(month: YearMonth) -> str:
    year, month_number = month
    return f"{year:04d}-{month_number:02d}"


def month_days(month: YearMonth) -> list[str]:
    """Todas as datas YYYY-MM-DD do mês, em ordem."""
    label = month_label(month)
    return [f"{label}-{day:02d}" for day in range(1, days_in_month(*month) + 1)]


def round_cents(value: float) -> int:
    """Arredonda para o centavo inteiro mais próximo (meio: afasta do zero)."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _empty_grid(days: Sequence[str], profit_centers: Sequence[ProfitCenterOut]) -> dict[str, dict[str, int]]:
    return {d: {pc.id: 0 for pc in profit_centers} for d in days}


def compute_dashboard(
    companies: Sequence[CompanyOut],
    profit_centers: Sequence[ProfitCenterOut],
    transactions: Sequence[TransactionOut],
    month: YearMonth,
    today: date,
) -> DashboardReport:
    year, month_number = month
    n_days = days_in_month(year, month_number)
    days = month_days(month)

    actual = _empty_grid(days, profit_centers)
    projected = _empty_grid(days, profit_centers)

    for txn in transactions:
        grid = projected if txn.is_projected else actual
        cells = grid.get(txn.txn_date.isoformat())
        # fora do mês ou profit center desconhecido/inativo: ignora
        if cells is None or txn.profit_center_id not in cells:
            continue
        cells[txn.profit_center_id] += txn.amount_cents

    is_current_month = (today.year, today.month) == (year, month_number)
    day_of_month = today.day if is_current_month else n_days

    companies_by_id = {c.id: c for c in companies}

    rows: list[DashboardProfitCenter] = []
    for pc in profit_centers:
        company = companies_by_id.get(pc.company_id)

        daily = {d: actual[d][pc.id] for d in days}
        daily_projected = {d: projected[d][pc.id] for d in days}

        mtd = sum(daily[d] for d in days[:day_of_month])
        avg_daily = mtd / day_of_month if day_of_month > 0 else 0.0
        projection = round_cents(avg_daily * n_days) if is_current_month else mtd

        rows.append(
            DashboardProfitCenter(
                **pc.model_dump(),
                company_name=company.name if company else UNKNOWN_COMPANY_NAME,
                company_color=company.color if company else UNKNOWN_COMPANY_COLOR,
                daily=daily,
                daily_projected=daily_projected,
                mtd=mtd,
                avg_daily=avg_daily,
                projection=projection,
            )
        )

    grouped = [
        DashboardCompany(
            **c.model_dump(),
            profit_centers=[r for r in rows if r.company_id == c.id],
        )
        for c in companies
    ]

    daily_totals = {d: sum(r.daily[d] for r in rows) for d in days}
    daily_projected_totals = {d: sum(r.daily_projected[d] for r in rows) for d in days}

    grand_mtd = sum(r.mtd for r in rows)
    # None (linha antiga) conta como incluído
    grand_projection = sum(r.projection for r in rows if r.include_in_projection is not False)

    return DashboardReport(
        month=month_label(month),
        days_in_month=n_days,
        day_of_month=day_of_month,
        is_current_month=is_current_month,
        companies=grouped,
        profit_centers=rows,
        daily_totals=daily_totals,
        daily_projected_totals=daily_projected_totals,
        grand_mtd=grand_mtd,
        grand_projection=grand_projection,
    )
