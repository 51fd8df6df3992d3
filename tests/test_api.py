import pytest

from config import testing as testing_settings
from src.attendance_payroll.attendance_payroll import main
from src.attendance_payroll.attendance_payroll.main import create_app


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


def _add_employee(client, **extra):
    body = {"lastName": "Rahimi", "firstName": "Ali", "monthlySalary": 9_000_000, **extra}
    resp = client.post("/api/projects/p1/employees", json=body)
    assert resp.status_code == 201
    return resp.get_json()


def test_calendar_month(client):
    data = client.get("/api/calendar/1403/7").get_json()
    assert (data["days"], data["first_weekday"], data["label"]) == (30, 1, "مهر 1403")

    resp = client.get("/api/calendar/1403/13")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_calendar_today(client, fixed_today):
    assert client.get("/api/calendar/today").get_json()["date"] == "1403-07-01"


def test_attendance_and_payroll_flow(client):
    emp = _add_employee(client)

    resp = client.put(f"/api/projects/p1/attendance/{emp['id']}/1403-07-01", json={"value": "12"})
    assert resp.get_json() == {"success": True, "changed": {"1403-07-01": "12"}}

    grid = client.get("/api/projects/p1/attendance?year=1403&month=7").get_json()
    assert grid["year_month"] == "1403-07"
    assert grid["days"][5]["day_type"] == "friday"
    assert grid["rows"][0]["cells"] == {"1403-07-01": "12"}

    client.put(f"/api/projects/p1/financials/{emp['id']}/1403/7", json={"bonus": 40_000})

    rows = client.get("/api/projects/p1/reports/payroll?from=1403-07&to=1403-07").get_json()
    assert len(rows) == 1
    assert rows[0]["overtime_hours"] == 2
    assert rows[0]["total_pay"] == pytest.approx(360_000 + 40_000)
    assert rows[0]["total_pay_display"] == "۴۰۰٬۰۰۰"

    summary = client.get("/api/projects/p1/reports/summary?year=1403&month=7").get_json()
    assert summary[0]["total_worked_days"] == 1

    payslip = client.get(f"/api/projects/p1/reports/payslip/{emp['id']}?year=1403&month=7").get_json()
    assert payslip["net_pay"] == pytest.approx(400_000)


def test_reversed_range_is_swapped(client):
    emp = _add_employee(client)
    client.put(f"/api/projects/p1/attendance/{emp['id']}/1403-07-01", json={"value": "8"})
    client.put(f"/api/projects/p1/attendance/{emp['id']}/1403-08-01", json={"value": "8"})

    rows = client.get("/api/projects/p1/reports/payroll?from=1403-08&to=1403-07").get_json()
    assert rows[0]["effective_days"] == 2


def test_invalid_cell_value(client):
    emp = _add_employee(client)
    resp = client.put(f"/api/projects/p1/attendance/{emp['id']}/1403-07-01", json={"value": "30"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_unknown_employee_is_404(client):
    resp = client.patch("/api/projects/p1/employees/nobody", json={"position": "x"})
    assert resp.status_code == 404


def test_settings_endpoints(client):
    client.patch("/api/projects/p1/settings", json={"baseDayCount": 26, "currency": "Rial"})
    toggled = client.post("/api/projects/p1/settings/holidays/1403-07-08").get_json()
    assert toggled == {"date": "1403-07-08", "holiday": True}

    settings = client.get("/api/projects/p1/settings").get_json()
    assert settings["baseDayCount"] == 26
    assert settings["currency"] == "Rial"
    assert settings["holidays"] == ["1403-07-08"]

    resp = client.delete("/api/projects/p1/settings/codes/%D8%BA")
    assert resp.status_code == 400


def test_csv_download(client):
    _add_employee(client)
    resp = client.get("/api/projects/p1/reports/payroll.csv?year=1403&month=7&project_name=SiteA")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert resp.get_data(as_text=True).startswith("\ufeff")


def test_dashboard_modes(client, fixed_today):
    emp = _add_employee(client)
    client.put(f"/api/projects/p1/attendance/{emp['id']}/1403-07-01", json={"value": "8"})

    month = client.get("/api/projects/p1/dashboard?year=1403&month=7").get_json()
    assert month["daily"] == {"total": 1, "present": 1, "on_leave": 0, "absent": 0}
    assert month["monthly"]["total_pay"] == 300_000
    assert month["project_wide"] is None

    lifetime = client.get("/api/projects/p1/dashboard?mode=all").get_json()
    assert lifetime["monthly"] is None
    assert lifetime["project_wide"]["total_work_days"] == 1
    assert lifetime["trend"] == [{"label": "مهر 1403", "count": 1}]


def test_project_endpoints(client):
    listing = client.get("/api/projects").get_json()
    assert listing == {"default": "default", "projects": [{"id": "default", "name": "پروژه اصلی"}]}
    assert client.get("/api/projects/default").get_json() == {"id": "default", "name": "پروژه اصلی"}

    resp = client.post("/api/projects", json={"name": "Tower B"})
    assert resp.status_code == 201
    pid = resp.get_json()["id"]

    assert client.patch(f"/api/projects/{pid}", json={"name": "Tower C"}).get_json()["name"] == "Tower C"
    assert client.post("/api/projects", json={"name": " "}).status_code == 400
    assert client.delete("/api/projects/default").status_code == 400

    assert client.delete(f"/api/projects/{pid}").get_json() == {"success": True}
    assert client.delete(f"/api/projects/{pid}").status_code == 404
    assert [p["id"] for p in client.get("/api/projects").get_json()["projects"]] == ["default"]


def test_bulk_employee_update(client):
    first, second = _add_employee(client), _add_employee(client, firstName="Reza")

    resp = client.patch(
        "/api/projects/p1/employees",
        json={"ids": [first["id"], second["id"]], "updates": {"position": "Driver"}},
    )
    assert [e["position"] for e in resp.get_json()] == ["Driver", "Driver"]

    assert client.patch("/api/projects/p1/employees", json={"ids": [], "updates": {}}).status_code == 400
    resp = client.patch("/api/projects/p1/employees", json={"ids": ["missing"], "updates": {"position": "x"}})
    assert resp.status_code == 404


def test_note_endpoints(client):
    emp = _add_employee(client)

    resp = client.put(f"/api/projects/p1/notes/{emp['id']}/1403-07-02", json={"text": " late "})
    assert resp.get_json() == {"employee_id": emp["id"], "date_key": "1403-07-02", "text": "late"}

    data = client.get("/api/projects/p1/notes?year=1403&month=7").get_json()
    assert data == {"year_month": "1403-07", "notes": {emp["id"]: {"1403-07-02": "late"}}}

    assert client.put(f"/api/projects/p1/notes/{emp['id']}/1403-07-31", json={"text": "x"}).status_code == 400


def test_default_project_id_setting_reaches_the_container(monkeypatch, container_factory):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(testing_settings, "DEFAULT_PROJECT_ID", "site-a")
    seen = {}

    def fake_build_container(*, db_config, default_project_id):
        seen["default_project_id"] = default_project_id
        return container_factory(default_project_id=default_project_id)

    monkeypatch.setattr(main, "build_container", fake_build_container)
    client = create_app().test_client()

    assert seen == {"default_project_id": "site-a"}
    assert client.get("/api/projects").get_json()["default"] == "site-a"
    assert client.delete("/api/projects/site-a").status_code == 400
