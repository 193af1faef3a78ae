from httpx import AsyncClient

ANALYSIS_URL = "/api/v1/hr/attendance/analysis"


async def analyse(client: AsyncClient, employee_id: int, start: str, end: str) -> dict:
    response = await client.get(ANALYSIS_URL, params={
        "employee_id": employee_id, "start_date": start, "end_date": end,
    })
    assert response.status_code == 200
    return response.json()


async def test_recurring_holiday(client: AsyncClient, employee: dict):
    response = await client.post("/api/v1/hr/holiday/", json={
        "name": "Natal", "date": "2019-12-25", "is_recurring": True,
    })
    assert response.status_code == 200

    data = await analyse(client, employee["id"], "2024-12-25", "2024-12-25")

    assert data["days"][0]["status"] == "HOLIDAY"
    assert data["days"][0]["holiday_name"] == "Natal"
    assert data["totals"]["days_absent"] == 0


async def test_holiday_crud(client: AsyncClient):
    created = (await client.post("/api/v1/hr/holiday/", json={"name": "Tiradentes", "date": "2024-04-21"})).json()

    response = await client.put(f"/api/v1/hr/holiday/{created['id']}", json={"description": "Feriado nacional"})
    assert response.json()["description"] == "Feriado nacional"

    listing = (await client.get("/api/v1/hr/holiday/", params={"year": 2024})).json()
    assert listing["count"] == 1

    response = await client.delete(f"/api/v1/hr/holiday/{created['id']}")
    assert response.json()["success"] is True
    assert (await client.get(f"/api/v1/hr/holiday/{created['id']}")).status_code == 404


async def test_time_off_days(client: AsyncClient, employee: dict):
    response = await client.post("/api/v1/hr/time-off/", json={
        "employee_id": employee["id"],
        "type": "VACATION",
        "start_date": "2024-03-04",
        "end_date": "2024-03-08",
        "reason": "Ferias",
    })
    assert response.status_code == 200

    data = await analyse(client, employee["id"], "2024-03-04", "2024-03-10")

    assert [d["status"] for d in data["days"][:5]] == ["TIME_OFF"] * 5
    assert data["days"][0]["time_off_type"] == "VACATION"
    assert data["totals"]["time_off_days"] == 5
    assert data["totals"]["dsr_discounts"] == 0
    assert data["totals"]["balance_minutes"] == 0


async def test_time_off_range_validation(client: AsyncClient, employee: dict):
    response = await client.post("/api/v1/hr/time-off/", json={
        "employee_id": employee["id"], "start_date": "2024-03-08", "end_date": "2024-03-04",
    })

    assert response.status_code == 422


async def test_work_schedule_drives_expected_minutes(client: AsyncClient, employee: dict):
    response = await client.post("/api/v1/hr/work-schedule/", json={
        "employee_id": employee["id"],
        "saturday": True,
        "saturday_minutes": 240,
        "friday_minutes": 420,
        "daily_minutes": 440,
        "weekly_minutes": 2400,
    })
    assert response.status_code == 200

    data = await analyse(client, employee["id"], "2024-03-04", "2024-03-10")

    assert data["schedule"]["is_default"] is False
    assert [d["expected_minutes"] for d in data["days"]] == [440, 440, 440, 440, 420, 240, 0]

    response = await client.get(f"/api/v1/hr/work-schedule/{employee['id']}")
    assert response.json()["saturday_minutes"] == 240


async def test_missing_work_schedule(client: AsyncClient, employee: dict):
    response = await client.get(f"/api/v1/hr/work-schedule/{employee['id']}")

    assert response.status_code == 404


async def test_duplicate_holiday_date(client: AsyncClient):
    payload = {"name": "Tiradentes", "date": "2024-04-21"}
    assert (await client.post("/api/v1/hr/holiday/", json=payload)).status_code == 200

    response = await client.post("/api/v1/hr/holiday/", json=payload)

    assert response.status_code == 409


async def test_holiday_calendar_projects_recurring_dates(client: AsyncClient):
    await client.post("/api/v1/hr/holiday/", json={"name": "Natal", "date": "2019-12-25", "is_recurring": True})
    await client.post("/api/v1/hr/holiday/", json={"name": "Eleicao", "date": "2024-10-06"})

    response = await client.get("/api/v1/hr/holiday/calendar", params={
        "start_date": "2024-10-01", "end_date": "2025-12-31",
    })

    assert response.status_code == 200
    assert [(h["date"], h["name"]) for h in response.json()] == [
        ("2024-10-06", "Eleicao"),
        ("2024-12-25", "Natal"),
        ("2025-12-25", "Natal"),
    ]


async def test_moving_holiday_onto_taken_date(client: AsyncClient):
    await client.post("/api/v1/hr/holiday/", json={"name": "Tiradentes", "date": "2024-04-21"})
    other = (await client.post("/api/v1/hr/holiday/", json={"name": "Trabalho", "date": "2024-05-01"})).json()

    response = await client.put(f"/api/v1/hr/holiday/{other['id']}", json={"date": "2024-04-21"})

    assert response.status_code == 409
    assert (await client.get(f"/api/v1/hr/holiday/{other['id']}")).json()["date"] == "2024-05-01"
