from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.schemas.common.pagination import PaginatedResponse
from app.services.hr.holiday_service import HolidayService
from app.schemas.hr.holiday_schema import HolidayCreate, HolidayOccurrence, HolidayResponse, HolidayUpdate

router = APIRouter()

@router.post("/", response_model=HolidayResponse)
async def create_holiday(
    holiday: HolidayCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Register a holiday; recurring ones repeat every year on the same day"""
    return await HolidayService(session).create_holiday(holiday)

@router.get("/", response_model=PaginatedResponse[HolidayResponse])
async def get_holidays(
    page_index: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=1000),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    is_active: Optional[bool] = Query(None),
    session: AsyncSession = Depends(get_async_session)
):
    return await HolidayService(session).get_holidays(
        page_index=page_index,
        page_size=page_size,
        year=year,
        month=month,
        is_active=is_active
    )

@router.get("/calendar", response_model=List[HolidayOccurrence])
async def get_holiday_calendar(
    start_date: date = Query(...),
    end_date: date = Query(...),
    session: AsyncSession = Depends(get_async_session)
):
    """Holiday dates inside a period, recurring holidays included"""
    return await HolidayService(session).get_calendar(start_date, end_date)

@router.get("/{holiday_id}", response_model=HolidayResponse)
async def get_holiday(
    holiday_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    return await HolidayService(session).get_holiday(holiday_id)

@router.put("/{holiday_id}", response_model=HolidayResponse)
async def update_holiday(
    holiday_id: int,
    holiday: HolidayUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    return await HolidayService(session).update_holiday(holiday_id, holiday)

@router.delete("/{holiday_id}")
async def delete_holiday(
    holiday_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    result = await HolidayService(session).delete_holiday(holiday_id)
    return {"message": "Holiday deleted successfully", "success": result}
