from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.schemas.common.pagination import PaginatedResponse
from app.schemas.hr.employee_schema import EmployeeCreate, EmployeeResponse
from app.services.hr.employee_service import EmployeeService

router = APIRouter()

@router.post("/", response_model=EmployeeResponse)
async def create_employee(
    employee: EmployeeCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Create a new employee"""
    service = EmployeeService(session)
    return await service.create_employee(employee)

@router.get("/", response_model=PaginatedResponse[EmployeeResponse])
async def get_employees(
    page_index: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=1000),
    search: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None),
    session: AsyncSession = Depends(get_async_session)
):
    service = EmployeeService(session)
    return await service.get_employees(page_index, page_size, search, is_active)

@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = EmployeeService(session)
    return await service.get_employee(employee_id)
