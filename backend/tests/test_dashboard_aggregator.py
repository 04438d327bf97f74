from datetime import date

from fishpoles.dashboard.aggregator import (
    UNKNOWN_COMPANY_COLOR,
    UNKNOWN_COMPANY_NAME,
    compute_dashboard,
    days_in_month,
    month_days,
    round_cents,
)
from fishpoles.schemas.company import CompanyOut
from fishpoles.schemas.profit_center import ProfitCenterOut
from fishpoles.schemas.transaction import TransactionOut

HID = "h1"


def _company(cid="c1", name="Acme", color="#ff0000"):
    return CompanyOut(id=cid, holding_account_id=HID, name=name, color=color)


def _pc(pid="pc1", company_id="c1", include_in_projection=True):
    return ProfitCenterOut(
        id=pid,
        holding_account_id=HID,
        company_id=company_id,
        name=pid.upper(),
        include_in_projection=include_in_projection,
    )


_seq = iter(range(1, 100000))


def _txn(txn_date, amount_cents, pid="pc1", is_projected=False):
    return TransactionOut(
        id=f"t{next(_seq)}",
        holding_account_id=HID,
        profit_center_id=pid,
        company_id="c1",
        txn_date=txn_date,
        amount_cents=amount_cents,
        is_projected=is_projected,
    )


def test_days_in_month_leap_february():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert len(month_days((2024, 2))) == 29
    assert month_days((2024, 2))[0] == "2024-02-01"
    assert month_days((2024, 2))[-1] == "2024-02-29"


def test_round_cents_half_away_from_zero():
    assert round_cents(2.5) == 3
    assert round_cents(-2.5) == -3
    assert round_cents(1.4) == 1


def test_day_coverage_every_day_present():
    report = compute_dashboard([_company()], [_pc()], [], (2024, 2), date(2024, 2, 10))

    assert report.days_in_month == 29
    assert len(report.daily_totals) == 29
    assert len(report.daily_projected_totals) == 29
    assert len(report.profit_centers[0].daily) == 29
    assert all(v == 0 for v in report.daily_totals.values())


def test_current_month_run_rate_scenario():
    txns = [_txn("2024-02-01", 10000), _txn("2024-02-05", 5000)]
    report = compute_dashboard([_company()], [_pc()], txns, (2024, 2), date(2024, 2, 10))

    row = report.profit_centers[0]
    assert report.month == "2024-02"
    assert report.is_current_month is True
    assert report.day_of_month == 10
    assert row.mtd == 15000
    assert row.avg_daily == 1500
    assert row.projection == 43500
    assert report.grand_mtd == 15000
    assert report.grand_projection == 43500


def test_projected_transactions_never_hit_mtd():
    txns = [
        _txn("2024-02-03", 2000),
        _txn("2024-02-04", 99999, is_projected=True),
    ]
    report = compute_dashboard([_company()], [_pc()], txns, (2024, 2), date(2024, 2, 10))

    row = report.profit_centers[0]
    assert row.mtd == 2000
    assert report.daily_totals["2024-02-04"] == 0
    assert row.daily_projected["2024-02-04"] == 99999
    assert report.daily_projected_totals["2024-02-04"] == 99999


def test_mtd_clipped_at_today():
    txns = [_txn("2024-02-10", 1000), _txn("2024-02-11", 7000), _txn("2024-02-29", 7000)]
    report = compute_dashboard([_company()], [_pc()], txns, (2024, 2), date(2024, 2, 10))

    row = report.profit_centers[0]
    assert row.mtd == 1000
    # o grid diário continua mostrando o dia futuro
    assert row.daily["2024-02-11"] == 7000
    assert report.daily_totals["2024-02-29"] == 7000


def test_past_month_projection_equals_mtd():
    txns = [_txn(d, 1000) for d in month_days((2023, 11))]
    report = compute_dashboard([_company()], [_pc()], txns, (2023, 11), date(2024, 2, 10))

    row = report.profit_centers[0]
    assert report.is_current_month is False
    assert report.day_of_month == report.days_in_month == 30
    assert row.mtd == 30000
    assert row.projection == 30000
    assert report.grand_projection == 30000


def test_opt_out_keeps_own_projection_but_leaves_grand_total():
    pcs = [_pc("pc1"), _pc("pc2", include_in_projection=False)]
    txns = [_txn("2024-02-01", 1000, "pc1"), _txn("2024-02-01", 2000, "pc2")]
    report = compute_dashboard([_company()], pcs, txns, (2024, 2), date(2024, 2, 10))

    by_id = {r.id: r for r in report.profit_centers}
    assert by_id["pc2"].projection == round_cents(200 * 29)
    assert report.grand_mtd == 3000
    assert report.grand_projection == by_id["pc1"].projection


def test_legacy_null_include_flag_counts_as_included():
    pcs = [_pc("pc1", include_in_projection=None)]
    report = compute_dashboard([_company()], pcs, [_txn("2023-11-02", 500)], (2023, 11), date(2024, 2, 10))

    assert report.grand_projection == 500


def test_unknown_profit_center_transaction_is_dropped():
    txns = [_txn("2024-02-01", 1000), _txn("2024-02-01", 555, pid="ghost")]
    report = compute_dashboard([_company()], [_pc()], txns, (2024, 2), date(2024, 2, 10))

    assert report.grand_mtd == 1000
    assert report.daily_totals["2024-02-01"] == 1000


def test_out_of_month_transaction_is_dropped():
    txns = [_txn("2024-01-31", 1000), _txn("2024-03-01", 1000)]
    report = compute_dashboard([_company()], [_pc()], txns, (2024, 2), date(2024, 2, 10))

    assert report.grand_mtd == 0


def test_missing_company_gets_placeholder():
    report = compute_dashboard([], [_pc(company_id="gone")], [], (2024, 2), date(2024, 2, 10))

    row = report.profit_centers[0]
    assert row.company_name == UNKNOWN_COMPANY_NAME
    assert row.company_color == UNKNOWN_COMPANY_COLOR
    assert report.companies == []


def test_companies_nest_their_profit_centers_in_order():
    companies = [_company("c1", "A"), _company("c2", "B")]
    pcs = [_pc("pc1", "c1"), _pc("pc2", "c2"), _pc("pc3", "c1")]
    report = compute_dashboard(companies, pcs, [], (2024, 2), date(2024, 2, 10))

    nested = {c.id: [p.id for p in c.profit_centers] for c in report.companies}
    assert nested == {"c1": ["pc1", "pc3"], "c2": ["pc2"]}
    assert [p.id for p in report.profit_centers] == ["pc1", "pc2", "pc3"]
    assert report.profit_centers[1].company_name == "B"


def test_negative_amounts_round_away_from_zero():
    # -1 centavo em 2 dias: média -0.5 -> projeção -14.5 -> -15
    report = compute_dashboard([_company()], [_pc()], [_txn("2024-02-01", -1)], (2024, 2), date(2024, 2, 2))

    row = report.profit_centers[0]
    assert row.avg_daily == -0.5
    assert row.projection == -15


def test_same_inputs_same_json():
    txns = [_txn("2024-02-01", 1234), _txn("2024-02-07", 99, is_projected=True)]
    args = ([_company()], [_pc()], txns, (2024, 2), date(2024, 2, 10))

    assert compute_dashboard(*args).model_dump_json() == compute_dashboard(*args).model_dump_json()
