"""Example: use the pure report functions directly (no Flask, no database).

Controllers are a thin layer; the calculations take plain data in and return
immutable results.
"""

from src.attendance_payroll.attendance_payroll.attendance.aggregator import aggregate
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.jalali.model import YearMonth
from src.attendance_payroll.attendance_payroll.payroll.engine import compute_report
from src.attendance_payroll.attendance_payroll.payroll.formatting import format_currency
from src.attendance_payroll.attendance_payroll.settings.model import ProjectSettings


def main():
    employees = [Employee.from_dict({"id": "e1", "lastName": "Rahimi", "firstName": "Ali", "monthlySalary": 9_000_000})]
    ledger = {"e1": {"1403-07-01": "8", "1403-07-02": "12", "1403-07-03": "غ", "1403-07-04": "م"}}
    settings = ProjectSettings.from_dict({"baseDayCount": 30, "holidays": ["1403-07-02"]})
    month = YearMonth(1403, 7)

    summary = aggregate(employees, ledger, settings.day_rules, month)["e1"]
    report = compute_report(employees, ledger, settings, {"e1": {1403: {7: {"bonus": 500_000}}}}, month)["e1"]

    print(summary)
    print(report.employee_name, format_currency(report.total_pay, settings.currency, with_symbol=True))


if __name__ == "__main__":
    main()
