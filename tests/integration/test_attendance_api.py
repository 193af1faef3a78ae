import pytest
from httpx import AsyncClient

ANALYSIS_URL = "/api/v1/hr/attendance/analysis"
PUNCHES_URL = "/api/v1/hr/attendance/punches"
DAY_EDIT_URL = "/api/v1/hr/attendance/day-edit"


async def post_week(client: AsyncClient, employee_id: int):
    punches = ["2024-03-04T07:00:00", "2024-03-04T12:00:00", "2024-03-04T13:00:00", "2024-03-04T18:00:00"]
    for day in ("05", "07", "08"):
        punches += [f"2024-03-{day}T08:00:00", f"2024-03-{day}T12:00:00",
                    f"2024-03-{day}T13:00:00", f"2024-03-{day}T17:00:00"]
    response = await client.post(PUNCHES_URL, json={"employee_id": employee_id, "punches": punches})
    assert response.status_code == 200
    return response.json()


async def get_week(client: AsyncClient, employee_id: int):
    response = await client.get(ANALYSIS_URL, params={
        "employee_id": employee_id, "start_date": "2024-03-04", "end_date": "2024-03-10",
    })
    assert response.status_code == 200
    return response.json()


async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] in ("healthy", "degraded")


async def test_week_analysis(client: AsyncClient, employee: dict):
    await post_week(client, employee["id"])

    data = await get_week(client, employee["id"])

    assert data["employee"]["name"] == "Ana Souza"
    assert data["schedule"]["is_default"] is True
    assert len(data["days"]) == 7
    monday, wednesday = data["days"][0], data["days"][2]
    assert monday["status"] == "OVERTIME"
    assert monday["total_minutes"] == 600
    assert monday["overtime_rate"] == "NORMAL"
    assert monday["entry_time"] == "07:00:00"
    assert wednesday["status"] == "ABSENT"
    assert wednesday["undertime_minutes"] == 480

    totals = data["totals"]
    assert totals["days_worked"] == 4
    assert totals["balance_minutes"] == -360
    assert totals["balance_status"] == "negative"
    assert totals["dsr_discounts"] == 1
    assert totals["dsr_discounts_list"][0]["dsr_date"] == "2024-03-10"


async def test_duplicate_punches_are_skipped(client: AsyncClient, employee: dict):
    first = await post_week(client, employee["id"])
    second = await post_week(client, employee["id"])

    assert first == {"created": 16, "skipped": 0}
    assert second == {"created": 0, "skipped": 16}


async def test_day_edit_recomputes_day(client: AsyncClient, employee: dict):
    await post_week(client, employee["id"])

    response = await client.put(DAY_EDIT_URL, json={
        "employee_id": employee["id"],
        "date": "2024-03-06",
        "entry_time": "08:00",
        "lunch_start": "12:00",
        "lunch_end": "13:00",
        "exit_time": "17:30",
        "notes": "Relogio com defeito",
    })

    assert response.status_code == 200
    day = response.json()
    assert day["source"] == "MANUAL_EDIT"
    assert day["status"] == "OVERTIME"
    assert day["overtime_minutes"] == 30

    data = await get_week(client, employee["id"])
    assert data["totals"]["dsr_discounts"] == 0
    assert data["totals"]["balance_minutes"] == 150

    # saving again replaces the previous edit
    response = await client.put(DAY_EDIT_URL, json={
        "employee_id": employee["id"], "date": "2024-03-06", "entry_time": "08:00", "exit_time": "12:00",
    })
    assert response.json()["total_minutes"] == 240


async def test_delete_day_edit_restores_punches(client: AsyncClient, employee: dict):
    await post_week(client, employee["id"])
    await client.put(DAY_EDIT_URL, json={
        "employee_id": employee["id"], "date": "2024-03-04", "entry_time": "08:00", "exit_time": "16:00",
    })

    response = await client.delete(f"{DAY_EDIT_URL}/{employee['id']}/2024-03-04")
    assert response.status_code == 200

    data = await get_week(client, employee["id"])
    assert data["days"][0]["source"] == "PUNCHES"
    assert data["days"][0]["total_minutes"] == 600

    response = await client.delete(f"{DAY_EDIT_URL}/{employee['id']}/2024-03-04")
    assert response.status_code == 404


async def test_malformed_day_edit_time(client: AsyncClient, employee: dict):
    response = await client.put(DAY_EDIT_URL, json={
        "employee_id": employee["id"], "date": "2024-03-04", "entry_time": "25:00",
    })

    assert response.status_code == 422


@pytest.mark.parametrize("params", [
    {"employee_id": 1, "start_date": "2024-03-04"},
    {"employee_id": 1, "end_date": "2024-03-04"},
])
async def test_missing_date_range(client: AsyncClient, employee: dict, params: dict):
    response = await client.get(ANALYSIS_URL, params=params)

    assert response.status_code == 422


async def test_unknown_employee(client: AsyncClient):
    response = await client.get(ANALYSIS_URL, params={
        "employee_id": 999, "start_date": "2024-03-04", "end_date": "2024-03-10",
    })

    assert response.status_code == 404


async def test_duplicate_employee_number(client: AsyncClient, employee: dict):
    response = await client.post("/api/v1/hr/employee/", json={"employee_number": 1001, "name": "Outro Nome"})

    assert response.status_code == 409
