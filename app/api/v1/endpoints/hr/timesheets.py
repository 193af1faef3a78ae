from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.schemas.common.pagination import PaginatedResponse
from app.schemas.hr.timesheet_schema import TimesheetCreate, TimesheetResponse
from app.services.hr.timesheet_service import TimesheetService

router = APIRouter()

@router.post("/", response_model=TimesheetResponse)
async def create_timesheet(
    timesheet: TimesheetCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Analyse the period and save its totals as a timesheet"""
    service = TimesheetService(session)
    return await service.create_timesheet(timesheet)

@router.get("/", response_model=PaginatedResponse[TimesheetResponse])
async def get_timesheets(
    page_index: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=1000),
    employee_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session)
):
    service = TimesheetService(session)
    return await service.get_timesheets(page_index, page_size, employee_id)
