import logging
from typing import Any, Dict, List, Optional
from datetime import date, datetime, time, timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import and_, or_, select

from app.core.exceptions import InputError, NotFoundError, ValidationError
from app.models.hr.day_edit import DayEdit
from app.models.hr.employee import Employee
from app.models.hr.holiday import Holiday
from app.models.hr.time_off import TimeOff
from app.models.hr.time_record import TimeRecord
from app.models.hr.work_schedule import WorkSchedule
from app.schemas.hr.attendance_schema import SLOT_FIELDS, AnalysisResult, DayEditCreate, DayRecord, PunchCreate
from app.services.hr.attendance import analyze_period
from app.utils.time_utils import format_hhmm, to_local_datetime

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, session: AsyncSession):
        self.session = session

    # region Loaders
    async def _get_employee(self, employee_id: int) -> Employee:
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

    async def _get_schedule(self, employee_id: int) -> Optional[WorkSchedule]:
        result = await self.session.execute(
            select(WorkSchedule).where(
                WorkSchedule.employee_id == employee_id,
                WorkSchedule.is_deleted == False
            )
        )
        return result.scalar_one_or_none()

    async def _get_punches(self, employee_id: int, start_date: date, end_date: date) -> List[TimeRecord]:
        result = await self.session.execute(
            select(TimeRecord).where(
                TimeRecord.employee_id == employee_id,
                TimeRecord.is_deleted == False,
                TimeRecord.date_time >= datetime.combine(start_date, time.min),
                TimeRecord.date_time < datetime.combine(end_date + timedelta(days=1), time.min)
            ).order_by(TimeRecord.date_time)
        )
        return list(result.scalars().all())

    async def _get_day_edits(self, employee_id: int, start_date: date, end_date: date) -> List[DayEdit]:
        result = await self.session.execute(
            select(DayEdit).where(
                DayEdit.employee_id == employee_id,
                DayEdit.edit_date >= start_date,
                DayEdit.edit_date <= end_date
            )
        )
        return list(result.scalars().all())

    async def _get_holidays(self, start_date: date, end_date: date) -> List[Holiday]:
        # recurring holidays are matched on month/day by the engine
        result = await self.session.execute(
            select(Holiday).where(
                Holiday.is_active == True,
                Holiday.is_deleted == False,
                or_(
                    and_(Holiday.date >= start_date, Holiday.date <= end_date),
                    Holiday.is_recurring == True
                )
            )
        )
        return list(result.scalars().all())

    async def _get_time_offs(self, employee_id: int, start_date: date, end_date: date) -> List[TimeOff]:
        result = await self.session.execute(
            select(TimeOff).where(
                TimeOff.employee_id == employee_id,
                TimeOff.is_deleted == False,
                TimeOff.start_date <= end_date,
                TimeOff.end_date >= start_date
            )
        )
        return list(result.scalars().all())
    # endregion

    async def get_analysis(self, employee_id: int, start_date: Optional[date], end_date: Optional[date]) -> AnalysisResult:
        """Load every input for the period, then run the engine once"""
        if start_date is None or end_date is None:
            raise ValidationError("start_date and end_date are required")

        employee = await self._get_employee(employee_id)
        schedule = await self._get_schedule(employee_id)
        punches = await self._get_punches(employee_id, start_date, end_date)
        edits = await self._get_day_edits(employee_id, start_date, end_date)
        holidays = await self._get_holidays(start_date, end_date)
        time_offs = await self._get_time_offs(employee_id, start_date, end_date)

        try:
            return analyze_period(
                employee=employee,
                schedule=schedule,
                punches=punches,
                overrides={(edit.employee_id, edit.edit_date): edit for edit in edits},
                holidays=holidays,
                time_offs=time_offs,
                start_date=start_date,
                end_date=end_date,
            )
        except InputError as e:
            logger.warning(f"Invalid attendance input for employee {employee_id}: {e}")
            raise ValidationError(str(e))

    async def upsert_day_edit(self, data: DayEditCreate) -> DayRecord:
        """Save the manual override for one day and return that day recomputed"""
        await self._get_employee(data.employee_id)
        try:
            result = await self.session.execute(
                select(DayEdit).where(
                    DayEdit.employee_id == data.employee_id,
                    DayEdit.edit_date == data.date
                )
            )
            edit = result.scalar_one_or_none()
            if edit is None:
                edit = DayEdit(employee_id=data.employee_id, edit_date=data.date)
                self.session.add(edit)

            for name in SLOT_FIELDS:
                setattr(edit, name, format_hhmm(getattr(data, name)))
            edit.notes = data.notes

            await self.session.commit()
            logger.info(f"Day edit saved for employee {data.employee_id} on {data.date}")

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error saving day edit: {str(e)}")
            raise

        analysis = await self.get_analysis(data.employee_id, data.date, data.date)
        return analysis.days[0]

    async def delete_day_edit(self, employee_id: int, edit_date: date) -> bool:
        """Drop a manual override; the day falls back to its raw punches"""
        result = await self.session.execute(
            select(DayEdit).where(
                DayEdit.employee_id == employee_id,
                DayEdit.edit_date == edit_date
            )
        )
        edit = result.scalar_one_or_none()
        if not edit:
            raise NotFoundError(f"No day edit for employee {employee_id} on {edit_date}")

        try:
            await self.session.delete(edit)
            await self.session.commit()
            logger.info(f"Day edit removed for employee {employee_id} on {edit_date}")
            return True
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error deleting day edit: {str(e)}")
            raise

    async def record_punches(self, data: PunchCreate) -> Dict[str, Any]:
        """Store manual punches; a punch already on file for that minute is skipped"""
        await self._get_employee(data.employee_id)
        punches = sorted({to_local_datetime(p) for p in data.punches})

        try:
            result = await self.session.execute(
                select(TimeRecord.date_time).where(
                    TimeRecord.employee_id == data.employee_id,
                    TimeRecord.date_time.in_(punches)
                )
            )
            existing = set(result.scalars().all())

            created = 0
            for punch in punches:
                if punch in existing:
                    continue
                self.session.add(TimeRecord(
                    employee_id=data.employee_id,
                    date_time=punch,
                    machine_number=data.machine_number,
                    is_manual=True,
                    notes=data.notes,
                ))
                created += 1

            await self.session.commit()
            logger.info(f"Punches recorded for employee {data.employee_id}: {created} new, {len(punches) - created} skipped")
            return {"created": created, "skipped": len(punches) - created}

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error recording punches: {str(e)}")
            raise
