from src.attendance_payroll.attendance_payroll.attendance.aggregator import aggregate, tally_month
from src.attendance_payroll.attendance_payroll.core.enums import DayType
from src.attendance_payroll.attendance_payroll.jalali.model import YearMonth
from src.attendance_payroll.attendance_payroll.settings.model import DayRuleSet

MEHR = YearMonth(1403, 7)
ABAN = YearMonth(1403, 8)


def test_counts_each_category(make_employee):
    cells = {
        "1403-07-01": "8",
        "1403-07-02": "12",
        "1403-07-03": "غ",
        "1403-07-04": "م",
        "1403-07-05": "ا",
        "1403-07-06": "9",  # Friday
        "1403-07-07": "x",
    }
    rules = DayRuleSet(holidays=frozenset({"1403-07-08"}))
    cells["1403-07-08"] = "10"

    summary = aggregate([make_employee("e1")], {"e1": cells}, rules, MEHR)["e1"]

    assert summary.presence_days == 2
    assert summary.absent_days == 1
    assert summary.leave_days == 1
    assert summary.sick_days == 1
    assert summary.weekly_rest_work_days == 1
    assert summary.holiday_work_days == 1
    assert summary.overtime_hours == 2
    assert summary.total_worked_days == 2 + 1 + 1 + 1 + 1
    assert summary.notes == ""


def test_weekly_rest_work_is_counted_separately(make_employee):
    summary = aggregate([make_employee("e1")], {"e1": {"1403-07-13": "8"}}, DayRuleSet(), MEHR)["e1"]

    assert summary.presence_days == 0
    assert summary.weekly_rest_work_days == 1
    assert summary.total_worked_days == 1


def test_override_turns_friday_into_a_normal_day(make_employee):
    rules = DayRuleSet(overrides={"1403-07-13": DayType.NORMAL})
    summary = aggregate([make_employee("e1")], {"e1": {"1403-07-13": "8"}}, rules, MEHR)["e1"]

    assert summary.presence_days == 1
    assert summary.weekly_rest_work_days == 0


def test_overtime_accumulates_above_ten_hours():
    tally = tally_month({"1403-07-01": "23", "1403-07-02": "10", "1403-07-03": "11.5"}, MEHR, DayRuleSet())
    assert tally.overtime_hours == 13 + 1.5
    assert tally.worked_days == 3


def test_employee_without_records_gets_zero_summary(make_employee):
    employees = [make_employee("e1"), make_employee("e2")]
    result = aggregate(employees, {"e1": {"1403-07-01": "8"}}, DayRuleSet(), MEHR)

    assert list(result) == ["e1", "e2"]
    empty = result["e2"]
    assert (empty.presence_days, empty.absent_days, empty.overtime_hours, empty.total_worked_days) == (0, 0, 0, 0)


def test_range_is_the_sum_of_its_months(make_employee):
    cells = {
        "1403-07-01": "12",
        "1403-07-20": "غ",
        "1403-08-02": "8",
        "1403-08-03": "م",
        "1403-09-01": "8",
    }
    employees = [make_employee("e1")]
    rules = DayRuleSet()

    both = aggregate(employees, {"e1": cells}, rules, MEHR, ABAN)["e1"]
    first = aggregate(employees, {"e1": cells}, rules, MEHR)["e1"]
    second = aggregate(employees, {"e1": cells}, rules, ABAN)["e1"]

    assert both.presence_days == first.presence_days + second.presence_days == 2
    assert both.absent_days == first.absent_days + second.absent_days
    assert both.leave_days == first.leave_days + second.leave_days
    assert both.overtime_hours == first.overtime_hours + second.overtime_hours
    assert both.total_worked_days == first.total_worked_days + second.total_worked_days


def test_settlement_adds_note(make_employee):
    result = aggregate([make_employee("e1")], {"e1": {"1403-07-29": "ت", "1403-07-30": "ت"}}, DayRuleSet(), MEHR)
    assert result["e1"].notes == "تسویه"
    assert result["e1"].total_worked_days == 0


def test_cells_outside_range_and_bad_keys_are_ignored(make_employee):
    cells = {"1403-06-31": "8", "1403-07-31": "8", "garbage": "8"}
    summary = aggregate([make_employee("e1")], {"e1": cells}, DayRuleSet(), MEHR)["e1"]
    assert summary.total_worked_days == 0


def test_inputs_are_not_mutated(make_employee):
    cells = {"1403-07-01": "8"}
    ledger = {"e1": cells}
    aggregate([make_employee("e1")], ledger, DayRuleSet(), MEHR)
    assert ledger == {"e1": {"1403-07-01": "8"}}
