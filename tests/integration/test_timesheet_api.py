from datetime import date
from httpx import AsyncClient
from app.services.hr.timesheet_service import TimesheetService

TIMESHEET_URL = "/api/v1/hr/timesheet/"


async def test_timesheet_snapshot(client: AsyncClient, employee: dict):
    await client.post("/api/v1/hr/attendance/punches", json={
        "employee_id": employee["id"],
        "punches": ["2024-03-04T07:00:00", "2024-03-04T12:00:00", "2024-03-04T13:00:00", "2024-03-04T18:00:00"],
    })

    response = await client.post(TIMESHEET_URL, json={
        "employee_id": employee["id"], "start_date": "2024-03-04", "end_date": "2024-03-05",
    })

    assert response.status_code == 200
    timesheet = response.json()
    assert timesheet["employee_name"] == "Ana Souza"
    assert timesheet["employee_number"] == 1001
    assert timesheet["total_days"] == 2
    assert timesheet["worked_days"] == 1
    assert timesheet["absent_days"] == 1
    assert timesheet["total_minutes_worked"] == 600
    assert timesheet["total_minutes_expected"] == 960
    assert timesheet["balance_minutes"] == -360
    assert timesheet["dsr_discounts"] == 1
    assert timesheet["generated_by"] == "system"

    listing = (await client.get(TIMESHEET_URL, params={"employee_id": employee["id"]})).json()
    assert listing["count"] == 1
    assert listing["data"][0]["id"] == timesheet["id"]


async def test_timesheet_for_unknown_employee(client: AsyncClient):
    response = await client.post(TIMESHEET_URL, json={
        "employee_id": 42, "start_date": "2024-03-04", "end_date": "2024-03-05",
    })

    assert response.status_code == 404


async def test_timesheet_rejects_inverted_range(client: AsyncClient, employee: dict):
    response = await client.post(TIMESHEET_URL, json={
        "employee_id": employee["id"], "start_date": "2024-03-05", "end_date": "2024-03-04",
    })

    assert response.status_code == 422


async def test_monthly_generation_is_idempotent(client: AsyncClient, employee: dict, session_maker):
    async with session_maker() as session:
        created = await TimesheetService(session).generate_monthly_timesheets(date(2024, 4, 10))
        again = await TimesheetService(session).generate_monthly_timesheets(date(2024, 4, 10))

    assert len(created) == 1
    assert again == []
    assert created[0].start_date == date(2024, 3, 1)
    assert created[0].end_date == date(2024, 3, 31)
    assert created[0].total_days == 31
