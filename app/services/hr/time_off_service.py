import logging
from typing import Any, Dict, Optional
from datetime import date
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.models.hr.employee import Employee
from app.models.hr.time_off import TimeOff
from app.schemas.hr.time_off_schema import TimeOffCreate, TimeOffUpdate

logger = logging.getLogger(__name__)


class TimeOffService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_time_off(self, data: TimeOffCreate) -> TimeOff:
        try:
            employee = await self.session.get(Employee, data.employee_id)
            if not employee or employee.is_deleted:
                raise NotFoundError(f"Employee with ID {data.employee_id} not found")

            time_off = TimeOff(**data.dict())
            self.session.add(time_off)
            await self.session.commit()
            await self.session.refresh(time_off)

            logger.info(
                f"Time off created: {time_off.type.value} for employee {time_off.employee_id} "
                f"({time_off.start_date} - {time_off.end_date})"
            )
            return time_off

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating time off: {str(e)}")
            raise

    async def get_time_off(self, time_off_id: int) -> TimeOff:
        result = await self.session.execute(
            select(TimeOff).where(
                TimeOff.id == time_off_id,
                TimeOff.is_deleted == False
            )
        )
        time_off = result.scalar_one_or_none()
        if not time_off:
            raise NotFoundError(f"Time off with ID {time_off_id} not found")
        return time_off

    async def get_time_offs(
        self,
        page_index: int = 1,
        page_size: int = 100,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> Dict[str, Any]:
        conditions = [TimeOff.is_deleted == False]
        if employee_id:
            conditions.append(TimeOff.employee_id == employee_id)
        # overlap with the requested window
        if start_date:
            conditions.append(TimeOff.end_date >= start_date)
        if end_date:
            conditions.append(TimeOff.start_date <= end_date)

        total_count = await self.session.scalar(
            select(func.count(TimeOff.id)).where(*conditions)
        )

        skip = (page_index - 1) * page_size
        time_offs = await self.session.scalars(
            select(TimeOff)
            .where(*conditions)
            .order_by(TimeOff.start_date.desc())
            .offset(skip)
            .limit(page_size)
        )

        return {
            "page_index": page_index,
            "page_size": page_size,
            "count": total_count or 0,
            "data": time_offs.all()
        }

    async def update_time_off(self, time_off_id: int, data: TimeOffUpdate) -> TimeOff:
        time_off = await self.get_time_off(time_off_id)

        update_data = data.dict(exclude_unset=True)
        start_date = update_data.get("start_date", time_off.start_date)
        end_date = update_data.get("end_date", time_off.end_date)
        if end_date < start_date:
            raise ValidationError("end_date must not be before start_date")

        try:
            for field, value in update_data.items():
                setattr(time_off, field, value)
            await self.session.commit()
            await self.session.refresh(time_off)

            logger.info(f"Time off {time_off_id} updated")
            return time_off
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error updating time off {time_off_id}: {str(e)}")
            raise

    async def delete_time_off(self, time_off_id: int) -> bool:
        """Soft delete a time off"""
        time_off = await self.get_time_off(time_off_id)
        time_off.soft_delete()
        await self.session.commit()

        logger.info(f"Time off {time_off_id} deleted")
        return True
