import pytest

from src.attendance_payroll.attendance_payroll.core.exceptions import NotFoundError, ValidationError
from src.attendance_payroll.attendance_payroll.jalali.model import YearMonth


@pytest.fixture
def svc(container, make_employee):
    container.employees_repo.add("p1", make_employee("e1"))
    container.employees_repo.add("p1", make_employee("e2"))
    return container.note_service


def test_note_text_is_trimmed(svc, container):
    note = svc.set_note("p1", "e1", "1403-07-01", "  left early \n")

    assert note.text == "left early"
    assert container.notes_repo.get("p1", "e1", "1403-07-01") == "left early"
    assert svc.get("p1", "e1", "1403-07-01").text == "left early"


def test_blank_text_deletes_the_note(svc, container):
    svc.set_note("p1", "e1", "1403-07-01", "late")

    assert svc.set_note("p1", "e1", "1403-07-01", "   ").text == ""
    assert container.notes_repo.get("p1", "e1", "1403-07-01") is None
    assert svc.get("p1", "e1", "1403-07-01").text == ""


@pytest.mark.parametrize("key", ["1403-07-31", "1403-7-1", "۱۴۰۳-۰۷-۰۱", "1403-07-01\n"])
def test_invalid_date_is_rejected(svc, container, key):
    with pytest.raises(ValidationError):
        svc.set_note("p1", "e1", key, "late")
    assert container.notes_repo.get_for_project("p1") == {}


def test_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.set_note("p1", "nobody", "1403-07-01", "late")


def test_month_notes_keep_only_that_month(svc):
    svc.set_note("p1", "e1", "1403-07-01", "late")
    svc.set_note("p1", "e1", "1403-08-01", "sick")
    svc.set_note("p1", "e2", "1403-08-03", "site visit")

    assert svc.month_notes("p1", YearMonth(1403, 7)) == {"e1": {"1403-07-01": "late"}}
    assert svc.month_notes("p1", YearMonth(1403, 8)) == {
        "e1": {"1403-08-01": "sick"},
        "e2": {"1403-08-03": "site visit"},
    }
    assert svc.month_notes("p2", YearMonth(1403, 7)) == {}
