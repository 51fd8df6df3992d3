"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BASE_DAY_COUNT = 30
DEFAULT_PROJECT_ID = "default"
DEFAULT_PROJECT_NAME = "پروژه اصلی"

# A worked day longer than this many hours accrues overtime.
STANDARD_SHIFT_HOURS = 10
# Every N overtime hours convert to one extra payable day.
OVERTIME_HOURS_PER_DAY = 10

MIN_WORKED_HOURS = 1
MAX_WORKED_HOURS = 23

# Saturday-first week: 0 = Saturday ... 6 = Friday.
WEEKLY_REST_WEEKDAY = 6

# year % 33 residues that make Esfand 30 days long.
LEAP_YEAR_RESIDUES = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

MIN_KEY_YEAR = 1300
MAX_KEY_YEAR = 1500

JALALI_MONTHS = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

SETTLEMENT_NOTE = "تسویه"
