import pytest

from src.attendance_payroll.attendance_payroll.financials.model import MonthlyFinancials
from src.attendance_payroll.attendance_payroll.jalali.converter import format_date_key
from src.attendance_payroll.attendance_payroll.jalali.model import YearMonth
from src.attendance_payroll.attendance_payroll.payroll.engine import compute_report
from src.attendance_payroll.attendance_payroll.settings.model import ProjectSettings

MEHR = YearMonth(1403, 7)
ABAN = YearMonth(1403, 8)


def _report(employee, cells, *, settings=None, financials=None, start=MEHR, end=None):
    reports = compute_report(
        [employee],
        {employee.employee_id: cells},
        settings or ProjectSettings(),
        financials or {},
        start,
        end,
    )
    return reports[employee.employee_id]


def test_single_absence_pays_nothing(make_employee):
    report = _report(make_employee("e1"), {"1403-07-03": "غ"})

    assert report.daily_rate == 300_000
    assert report.effective_days == 0
    assert report.absent_days == 1
    assert report.total_pay == 0


def test_full_month_without_overtime(make_employee):
    cells = {format_date_key(1403, 7, d): "8" for d in range(1, 31)}
    report = _report(make_employee("e1"), cells)

    assert report.effective_days == 30
    assert report.overtime_hours == 0
    assert report.total_pay == 9_000_000


def test_overtime_adds_payable_days(make_employee):
    report = _report(make_employee("e1"), {"1403-07-01": "15", "1403-07-02": "15"})

    assert report.overtime_hours == 10
    assert report.total_payable_days == 3
    assert report.total_pay == 900_000


def test_single_long_day_counts_overtime_as_tenths(make_employee):
    report = _report(make_employee("e1"), {"1403-07-01": "23"})

    assert report.effective_days == 1
    assert report.overtime_hours == 13
    assert report.total_payable_days == pytest.approx(2.3)
    assert report.total_pay == pytest.approx(690_000)


def test_paid_leave_and_sick_days_are_payable(make_employee):
    report = _report(make_employee("e1"), {"1403-07-01": "م", "1403-07-02": "ا"})
    assert report.effective_days == 2
    assert report.total_pay == 600_000


def test_financials_adjust_the_total(make_employee):
    employee = make_employee("e1")
    cells = {"1403-07-01": "8"}
    base = _report(employee, cells).total_pay

    financials = {"e1": {1403: {7: MonthlyFinancials(advance=50_000, bonus=200_000, deduction=25_000)}}}
    report = _report(employee, cells, financials=financials)

    assert report.total_pay == base + 200_000 - 50_000 - 25_000
    assert (report.advance, report.bonus, report.deduction) == (50_000, 200_000, 25_000)


@pytest.mark.parametrize("field, sign", [("bonus", 1), ("advance", -1), ("deduction", -1)])
def test_adjustments_move_total_monotonically(make_employee, field, sign):
    employee = make_employee("e1")
    cells = {"1403-07-01": "8"}
    low = _report(employee, cells, financials={"e1": {1403: {7: {field: 1_000}}}}).total_pay
    high = _report(employee, cells, financials={"e1": {1403: {7: {field: 5_000}}}}).total_pay

    assert high - low == sign * 4_000


def test_total_may_go_negative(make_employee):
    financials = {"e1": {"1403": {"7": {"advance": 1_000_000}}}}
    report = _report(make_employee("e1"), {"1403-07-01": "8"}, financials=financials)
    assert report.total_pay == 300_000 - 1_000_000


def test_financials_of_every_month_in_range_are_summed(make_employee):
    financials = {"e1": {1403: {7: MonthlyFinancials(bonus=100), 8: MonthlyFinancials(bonus=200), 9: MonthlyFinancials(bonus=400)}}}
    report = _report(make_employee("e1"), {}, financials=financials, start=MEHR, end=ABAN)
    assert report.bonus == 300
    assert report.total_pay == 300


def test_non_positive_base_day_count_uses_30(make_employee):
    report = _report(make_employee("e1"), {"1403-07-01": "8"}, settings=ProjectSettings(base_day_count=0))
    assert report.daily_rate == 300_000


def test_custom_base_day_count(make_employee):
    report = _report(make_employee("e1", monthly_salary=2_600_000), {"1403-07-01": "8"}, settings=ProjectSettings(base_day_count=26))
    assert report.daily_rate == 100_000
    assert report.total_pay == 100_000


def test_values_stay_unrounded(make_employee):
    report = _report(make_employee("e1", monthly_salary=1_000_000), {"1403-07-01": "8"})
    assert report.daily_rate == pytest.approx(1_000_000 / 30)
    assert report.total_pay == pytest.approx(1_000_000 / 30)


def test_every_employee_is_reported_in_order(make_employee):
    employees = [make_employee("b"), make_employee("a")]
    reports = compute_report(employees, {}, ProjectSettings(), {}, MEHR)
    assert list(reports) == ["b", "a"]
    assert all(r.total_pay == 0 for r in reports.values())
