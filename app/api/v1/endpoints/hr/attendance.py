from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.schemas.hr.attendance_schema import AnalysisResult, DayEditCreate, DayRecord, PunchCreate
from app.services.hr.attendance_service import AttendanceService

router = APIRouter()

@router.get("/analysis", response_model=AnalysisResult)
async def get_attendance_analysis(
    employee_id: int = Query(...),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: AsyncSession = Depends(get_async_session)
):
    """Day-by-day reconciliation and period totals for one employee"""
    service = AttendanceService(session)
    return await service.get_analysis(employee_id, start_date, end_date)

@router.put("/day-edit", response_model=DayRecord)
async def upsert_day_edit(
    day_edit: DayEditCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Create or replace the manual edit of a day; returns the recomputed day"""
    service = AttendanceService(session)
    return await service.upsert_day_edit(day_edit)

@router.delete("/day-edit/{employee_id}/{edit_date}")
async def delete_day_edit(
    employee_id: int,
    edit_date: date,
    session: AsyncSession = Depends(get_async_session)
):
    service = AttendanceService(session)
    result = await service.delete_day_edit(employee_id, edit_date)
    return {"message": "Day edit deleted successfully", "success": result}

@router.post("/punches")
async def record_punches(
    punches: PunchCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Record manual punches; punches already on file are skipped"""
    service = AttendanceService(session)
    return await service.record_punches(punches)
