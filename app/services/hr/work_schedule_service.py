import logging
from typing import Any, Dict
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.hr.employee import Employee
from app.models.hr.work_schedule import WorkSchedule
from app.schemas.hr.work_schedule_schema import WorkScheduleCreate

logger = logging.getLogger(__name__)


class WorkScheduleService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert_schedule(self, data: WorkScheduleCreate) -> WorkSchedule:
        """One schedule per employee; saving again replaces the previous one"""
        try:
            employee = await self.session.get(Employee, data.employee_id)
            if not employee or employee.is_deleted:
                raise NotFoundError(f"Employee with ID {data.employee_id} not found")

            result = await self.session.execute(
                select(WorkSchedule).where(WorkSchedule.employee_id == data.employee_id)
            )
            schedule = result.scalar_one_or_none()
            if schedule is None:
                schedule = WorkSchedule(employee_id=data.employee_id)
                self.session.add(schedule)

            for field, value in data.dict(exclude={"employee_id"}).items():
                setattr(schedule, field, value)
            schedule.is_deleted = False

            await self.session.commit()
            await self.session.refresh(schedule)

            logger.info(f"Work schedule saved for employee {data.employee_id}")
            return schedule

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error saving work schedule: {str(e)}")
            raise

    async def get_schedule(self, employee_id: int) -> WorkSchedule:
        result = await self.session.execute(
            select(WorkSchedule).where(
                WorkSchedule.employee_id == employee_id,
                WorkSchedule.is_deleted == False
            )
        )
        schedule = result.scalar_one_or_none()
        if not schedule:
            raise NotFoundError(f"No work schedule for employee {employee_id}")
        return schedule

    async def get_schedules(self, page_index: int = 1, page_size: int = 100) -> Dict[str, Any]:
        conditions = [WorkSchedule.is_deleted == False]
        total_count = await self.session.scalar(
            select(func.count(WorkSchedule.id)).where(*conditions)
        )

        skip = (page_index - 1) * page_size
        schedules = await self.session.scalars(
            select(WorkSchedule)
            .where(*conditions)
            .order_by(WorkSchedule.employee_id)
            .offset(skip)
            .limit(page_size)
        )

        return {
            "page_index": page_index,
            "page_size": page_size,
            "count": total_count or 0,
            "data": schedules.all()
        }
