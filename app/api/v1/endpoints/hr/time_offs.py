from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.schemas.common.pagination import PaginatedResponse
from app.schemas.hr.time_off_schema import TimeOffCreate, TimeOffResponse, TimeOffUpdate
from app.services.hr.time_off_service import TimeOffService

router = APIRouter()

@router.post("/", response_model=TimeOffResponse)
async def create_time_off(
    time_off: TimeOffCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Register a leave (vacation, sick leave, ...) for an employee"""
    service = TimeOffService(session)
    return await service.create_time_off(time_off)

@router.get("/", response_model=PaginatedResponse[TimeOffResponse])
async def get_time_offs(
    page_index: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=1000),
    employee_id: Optional[int] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: AsyncSession = Depends(get_async_session)
):
    service = TimeOffService(session)
    return await service.get_time_offs(page_index, page_size, employee_id, start_date, end_date)

@router.get("/{time_off_id}", response_model=TimeOffResponse)
async def get_time_off(
    time_off_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = TimeOffService(session)
    return await service.get_time_off(time_off_id)

@router.put("/{time_off_id}", response_model=TimeOffResponse)
async def update_time_off(
    time_off_id: int,
    time_off: TimeOffUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    service = TimeOffService(session)
    return await service.update_time_off(time_off_id, time_off)

@router.delete("/{time_off_id}")
async def delete_time_off(
    time_off_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = TimeOffService(session)
    result = await service.delete_time_off(time_off_id)
    return {"message": "Time off deleted successfully", "success": result}
