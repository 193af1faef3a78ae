from fastapi import APIRouter
from app.api.v1.endpoints.hr import attendance, employees, holidays, time_offs, timesheets, work_schedules

api_router = APIRouter()

# HR routes
api_router.include_router(employees.router, prefix="/hr/employee", tags=["Human Resource"])
api_router.include_router(work_schedules.router, prefix="/hr/work-schedule", tags=["Human Resource"])
api_router.include_router(attendance.router, prefix="/hr/attendance", tags=["Human Resource"])
api_router.include_router(holidays.router, prefix="/hr/holiday", tags=["Human Resource"])
api_router.include_router(time_offs.router, prefix="/hr/time-off", tags=["Human Resource"])
api_router.include_router(timesheets.router, prefix="/hr/timesheet", tags=["Human Resource"])
