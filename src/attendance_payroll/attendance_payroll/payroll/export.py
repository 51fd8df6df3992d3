from __future__ import annotations

import csv
import io
from typing import Iterable, Optional

from ..core.constants import JALALI_MONTHS
from ..jalali.model import YearMonth
from .formatting import round_half_up
from .model import PayrollReport

CSV_HEADERS = (
    "نام کارمند",
    "نرخ روزانه",
    "روزهای موثر",
    "روزهای غیبت",
    "روزهای مرخصی",
    "اضافه کاری (ساعت)",
    "جمع کل حقوق",
)


def payroll_csv(reports: Iterable[PayrollReport]) -> str:
    """UTF-8 CSV (with BOM for Excel) of the payroll rows, money rounded."""
    buf = io.StringIO()
    buf.write("\ufeff")
    writer = csv.writer(buf, lineterminator="\r\n")
    writer.writerow(CSV_HEADERS)
    for r in reports:
        writer.writerow(
            [
                r.employee_name,
                round_half_up(r.daily_rate),
                r.effective_days,
                r.absent_days,
                r.leave_days,
                f"{r.overtime_hours:g}",
                round_half_up(r.total_pay),
            ]
        )
    return buf.getvalue()


def payroll_csv_filename(project_name: str, start: YearMonth, end: Optional[YearMonth] = None) -> str:
    end = end or start
    if start == end:
        period = f"{JALALI_MONTHS[start.month - 1]}-{start.year}"
    else:
        period = f"از-{JALALI_MONTHS[start.month - 1]}-{start.year}-تا-{JALALI_MONTHS[end.month - 1]}-{end.year}"
    return f"گزارش-حقوق-{project_name or 'پروژه'}-{period}.csv"
