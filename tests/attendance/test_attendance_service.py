import pytest

from src.attendance_payroll.attendance_payroll.core.enums import DayType
from src.attendance_payroll.attendance_payroll.core.exceptions import NotFoundError, ValidationError
from src.attendance_payroll.attendance_payroll.jalali.model import YearMonth


@pytest.fixture
def svc(container, make_employee):
    container.employees_repo.add("p1", make_employee("e1"))
    container.employees_repo.add("p1", make_employee("e2", is_archived=True))
    return container.attendance_service


def test_hours_are_normalized(svc, container):
    assert svc.set_cell("p1", "e1", "1403-07-01", " 8.0 ") == {"1403-07-01": "8"}
    assert svc.set_cell("p1", "e1", "1403-07-02", "10.5") == {"1403-07-02": "10.5"}
    assert container.attendance_repo.get_cells("p1", "e1") == {"1403-07-01": "8", "1403-07-02": "10.5"}


@pytest.mark.parametrize("value", ["0", "24", "0.5", "-2"])
def test_hours_out_of_range_are_rejected(svc, value):
    with pytest.raises(ValidationError):
        svc.set_cell("p1", "e1", "1403-07-01", value)


def test_codes_must_be_known(svc, container):
    assert svc.set_cell("p1", "e1", "1403-07-01", "غ") == {"1403-07-01": "غ"}
    with pytest.raises(ValidationError):
        svc.set_cell("p1", "e1", "1403-07-02", "x")

    container.settings_service.add_custom_code("p1", char="x")
    assert svc.set_cell("p1", "e1", "1403-07-02", "X") == {"1403-07-02": "x"}


def test_clearing_a_cell(svc, container):
    svc.set_cell("p1", "e1", "1403-07-01", "8")
    assert svc.set_cell("p1", "e1", "1403-07-01", "") == {"1403-07-01": ""}
    assert container.attendance_repo.get_cells("p1", "e1") == {}


def test_settlement_fills_rest_of_month(svc, container):
    changed = svc.set_cell("p1", "e1", "1403-07-28", "ت")

    assert changed == {"1403-07-28": "ت", "1403-07-29": "ت", "1403-07-30": "ت"}
    assert container.employees_repo.get("p1", "e1").settlement_date == "1403-07-28"


def test_bad_date_or_employee(svc):
    with pytest.raises(ValidationError):
        svc.set_cell("p1", "e1", "1403-07-31", "8")
    with pytest.raises(NotFoundError):
        svc.set_cell("p1", "nobody", "1403-07-01", "8")


@pytest.mark.parametrize("key", ["۱۴۰۳-۰۷-۰۱", "1403-07-01\n"])
def test_non_ascii_or_trailing_newline_keys_are_not_stored(svc, container, key):
    with pytest.raises(ValidationError):
        svc.set_cell("p1", "e1", key, "8")
    assert container.attendance_repo.get_cells("p1", "e1") == {}


def test_month_grid(svc, container):
    container.settings_service.toggle_holiday("p1", "1403-07-08")
    svc.set_cell("p1", "e1", "1403-07-01", "8")
    svc.set_cell("p1", "e1", "1403-08-01", "8")

    grid = svc.month_grid("p1", YearMonth(1403, 7))

    assert len(grid.days) == 30
    assert grid.days[0].weekday == 1
    assert grid.days[5].day_type == DayType.WEEKLY_REST
    assert grid.days[7].day_type == DayType.HOLIDAY
    assert [r.employee_id for r in grid.rows] == ["e1"]
    assert grid.rows[0].cells == {"1403-07-01": "8"}

    with_archived = svc.month_grid("p1", YearMonth(1403, 7), include_archived=True)
    assert [r.employee_id for r in with_archived.rows] == ["e1", "e2"]
