import pytest
from datetime import date
from types import SimpleNamespace
from app.schemas.hr.work_schedule_schema import WorkScheduleBase


@pytest.fixture
def employee():
    return SimpleNamespace(
        id=1,
        employee_number=1001,
        name="Ana Souza",
        position="Cashier",
        department="Store",
        birth_date=date(1990, 5, 15),
    )


@pytest.fixture
def schedule():
    return WorkScheduleBase(daily_minutes=480, weekly_minutes=2400, lunch_break_minutes=60)
