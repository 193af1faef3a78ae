from app.models.hr.employee import Employee
from app.models.hr.work_schedule import WorkSchedule
from app.models.hr.time_record import TimeRecord
from app.models.hr.day_edit import DayEdit
from app.models.hr.holiday import Holiday
from app.models.hr.time_off import TimeOff
from app.models.hr.timesheet import Timesheet


__all__ = [
    "Employee",
    "WorkSchedule",
    "TimeRecord",
    "DayEdit",
    "Holiday",
    "TimeOff",
    "Timesheet",
]
