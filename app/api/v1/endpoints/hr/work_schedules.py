from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.schemas.common.pagination import PaginatedResponse
from app.schemas.hr.work_schedule_schema import WorkScheduleCreate, WorkScheduleResponse
from app.services.hr.work_schedule_service import WorkScheduleService

router = APIRouter()

@router.post("/", response_model=WorkScheduleResponse)
async def save_work_schedule(
    schedule: WorkScheduleCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Create or replace an employee's work schedule"""
    service = WorkScheduleService(session)
    return await service.upsert_schedule(schedule)

@router.get("/", response_model=PaginatedResponse[WorkScheduleResponse])
async def get_work_schedules(
    page_index: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=1000),
    session: AsyncSession = Depends(get_async_session)
):
    service = WorkScheduleService(session)
    return await service.get_schedules(page_index, page_size)

@router.get("/{employee_id}", response_model=WorkScheduleResponse)
async def get_work_schedule(
    employee_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = WorkScheduleService(session)
    return await service.get_schedule(employee_id)
