import logging
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_

from app.core.exceptions import ConflictError, NotFoundError
from app.models.hr.employee import Employee
from app.schemas.hr.employee_schema import EmployeeCreate

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        try:
            number_res = await self.session.execute(
                select(Employee.id).where(
                    Employee.employee_number == data.employee_number
                ).limit(1)
            )
            if number_res.scalar_one_or_none() is not None:
                raise ConflictError(f"Employee number {data.employee_number} already exists")

            if data.email:
                email_res = await self.session.execute(
                    select(Employee.id).where(Employee.email == data.email).limit(1)
                )
                if email_res.scalar_one_or_none() is not None:
                    raise ConflictError(f"Employee with email '{data.email}' already exists")

            employee = Employee(**data.dict())
            self.session.add(employee)
            await self.session.commit()
            await self.session.refresh(employee)

            logger.info(f"Employee created: #{employee.employee_number} - {employee.name}")
            return employee

        except ConflictError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating employee: {str(e)}")
            raise

    async def get_employee(self, employee_id: int) -> Employee:
        result = await self.session.execute(
            select(Employee).where(
                Employee.id == employee_id,
                Employee.is_deleted == False
            )
        )
        employee = result.scalar_one_or_none()
        if not employee:
            raise NotFoundError(f"Employee with ID {employee_id} not found")
        return employee

    async def get_employees(
        self,
        page_index: int = 1,
        page_size: int = 100,
        search: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> Dict[str, Any]:
        conditions = [Employee.is_deleted == False]
        if is_active is not None:
            conditions.append(Employee.is_active == is_active)
        if search:
            conditions.append(or_(
                Employee.name.ilike(f"%{search}%"),
                Employee.department.ilike(f"%{search}%"),
                Employee.position.ilike(f"%{search}%")
            ))

        total_count = await self.session.scalar(
            select(func.count(Employee.id)).where(*conditions)
        )

        skip = (page_index - 1) * page_size
        employees = await self.session.scalars(
            select(Employee)
            .where(*conditions)
            .order_by(Employee.employee_number)
            .offset(skip)
            .limit(page_size)
        )

        return {
            "page_index": page_index,
            "page_size": page_size,
            "count": total_count or 0,
            "data": employees.all()
        }
