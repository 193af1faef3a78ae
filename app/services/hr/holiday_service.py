import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from datetime import date

from app.models.hr.holiday import Holiday
from app.schemas.hr.holiday_schema import HolidayCreate, HolidayOccurrence, HolidayUpdate
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.services.hr.attendance import holiday_matches
from app.utils.time_utils import iter_dates, month_bounds

logger = logging.getLogger(__name__)

class HolidayService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_holiday(self, holiday_data: HolidayCreate) -> Holiday:
        """Create a holiday; only one active holiday per date"""
        try:
            result = await self.db.execute(
                select(Holiday).where(
                    Holiday.date == holiday_data.date,
                    Holiday.is_active == True,
                    Holiday.is_deleted == False
                )
            )
            if result.scalars().first():
                raise ConflictError(f"Holiday already exists for {holiday_data.date}")

            holiday = Holiday(**holiday_data.dict())
            self.db.add(holiday)
            await self.db.commit()
            await self.db.refresh(holiday)

            kind = "recurring" if holiday.is_recurring else "one-off"
            logger.info(f"Holiday created: {holiday.name} on {holiday.date} ({kind})")
            return holiday

        except ConflictError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error creating holiday: {str(e)}")
            raise

    async def get_holidays(
        self,
        page_index: int = 1,
        page_size: int = 100,
        year: Optional[int] = None,
        month: Optional[int] = None,
        is_active: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Stored holidays, newest first; recurring ones are listed under their stored date"""
        conditions = [Holiday.is_deleted == False]

        if is_active is not None:
            conditions.append(Holiday.is_active == is_active)

        if month and not year:
            raise ValidationError("month filter requires a year")
        if year:
            start_date, end_date = month_bounds(date(year, month, 1)) if month else (date(year, 1, 1), date(year, 12, 31))
            conditions.append(Holiday.date.between(start_date, end_date))

        total_count = await self.db.scalar(
            select(func.count(Holiday.id)).where(*conditions)
        )

        skip = (page_index - 1) * page_size
        holidays = await self.db.scalars(
            select(Holiday)
            .where(*conditions)
            .order_by(Holiday.date.desc())
            .offset(skip)
            .limit(page_size)
        )

        return {
            "page_index": page_index,
            "page_size": page_size,
            "count": total_count or 0,
            "data": holidays.all()
        }

    async def get_calendar(self, start_date: date, end_date: date) -> List[HolidayOccurrence]:
        """Every holiday date inside the period, with recurring holidays projected onto it"""
        if end_date < start_date:
            raise ValidationError("end_date must not be before start_date")

        result = await self.db.execute(
            select(Holiday).where(
                Holiday.is_active == True,
                Holiday.is_deleted == False,
                or_(Holiday.date.between(start_date, end_date), Holiday.is_recurring == True)
            ).order_by(Holiday.id)
        )
        holidays = result.scalars().all()

        occurrences = []
        for day in iter_dates(start_date, end_date):
            for holiday in holidays:
                if holiday_matches(holiday, day):
                    occurrences.append(HolidayOccurrence(
                        holiday_id=holiday.id,
                        name=holiday.name,
                        date=day,
                        is_recurring=holiday.is_recurring,
                    ))
                    break
        return occurrences

    async def get_holiday(self, holiday_id: int) -> Holiday:
        result = await self.db.execute(
            select(Holiday).where(
                Holiday.id == holiday_id,
                Holiday.is_deleted == False
            )
        )
        holiday = result.scalar_one_or_none()
        if not holiday:
            raise NotFoundError(f"Holiday with ID {holiday_id} not found")
        return holiday

    async def update_holiday(self, holiday_id: int, holiday_data: HolidayUpdate) -> Holiday:
        holiday = await self.get_holiday(holiday_id)
        update_data = holiday_data.dict(exclude_unset=True)

        new_date = update_data.get("date")
        if new_date is not None and new_date != holiday.date:
            result = await self.db.execute(
                select(Holiday.id).where(
                    Holiday.date == new_date,
                    Holiday.id != holiday_id,
                    Holiday.is_active == True,
                    Holiday.is_deleted == False
                )
            )
            if result.scalars().first() is not None:
                raise ConflictError(f"Holiday already exists for {new_date}")

        for field, value in update_data.items():
            setattr(holiday, field, value)

        await self.db.commit()
        await self.db.refresh(holiday)

        logger.info(f"Holiday updated: {holiday.name}")
        return holiday

    async def delete_holiday(self, holiday_id: int) -> bool:
        """Soft delete; the date stops counting as a holiday on the next analysis"""
        holiday = await self.get_holiday(holiday_id)
        holiday.soft_delete()
        await self.db.commit()

        logger.info(f"Holiday deleted: {holiday.name}")
        return True
