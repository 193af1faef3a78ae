import logging
from typing import Any, Dict, List, Optional
from datetime import date, datetime, timedelta, timezone
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.hr.employee import Employee
from app.models.hr.timesheet import Timesheet
from app.schemas.hr.attendance_schema import AnalysisResult
from app.schemas.hr.timesheet_schema import TimesheetCreate
from app.services.hr.attendance_service import AttendanceService
from app.utils.time_utils import month_bounds

logger = logging.getLogger(__name__)


def timesheet_from_analysis(analysis: AnalysisResult, pdf_url: Optional[str] = None,
                            generated_by: Optional[str] = None) -> Timesheet:
    """Snapshot of an analysis' totals, ready to be saved"""
    totals = analysis.totals
    return Timesheet(
        employee_id=analysis.employee.id,
        employee_name=analysis.employee.name,
        employee_number=analysis.employee.employee_number,
        start_date=analysis.period.start_date,
        end_date=analysis.period.end_date,
        total_days=len(analysis.days),
        worked_days=totals.days_worked,
        absent_days=totals.days_absent,
        time_off_days=totals.time_off_days,
        holiday_days=totals.holiday_days,
        total_minutes_worked=totals.total_worked_minutes,
        total_minutes_expected=totals.total_expected_minutes,
        balance_minutes=totals.balance_minutes,
        dsr_discounts=totals.dsr_discounts,
        pdf_url=pdf_url,
        generated_by=generated_by or settings.TIMESHEET_GENERATED_BY,
        generated_at=datetime.now(timezone.utc),
    )


class TimesheetService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.attendance_service = AttendanceService(session)

    async def create_timesheet(self, data: TimesheetCreate, generated_by: Optional[str] = None) -> Timesheet:
        """Analyse the period and save its totals in a single commit"""
        analysis = await self.attendance_service.get_analysis(data.employee_id, data.start_date, data.end_date)
        try:
            timesheet = timesheet_from_analysis(analysis, data.pdf_url, generated_by)
            self.session.add(timesheet)
            await self.session.commit()
            await self.session.refresh(timesheet)

            logger.info(
                f"Timesheet saved for employee {timesheet.employee_id} "
                f"({timesheet.start_date} - {timesheet.end_date}), balance {timesheet.balance_minutes} min"
            )
            return timesheet

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error saving timesheet: {str(e)}")
            raise

    async def get_timesheets(
        self,
        page_index: int = 1,
        page_size: int = 100,
        employee_id: Optional[int] = None
    ) -> Dict[str, Any]:
        conditions = [Timesheet.is_deleted == False]
        if employee_id:
            conditions.append(Timesheet.employee_id == employee_id)

        total_count = await self.session.scalar(
            select(func.count(Timesheet.id)).where(*conditions)
        )

        skip = (page_index - 1) * page_size
        timesheets = await self.session.scalars(
            select(Timesheet)
            .where(*conditions)
            .order_by(Timesheet.start_date.desc(), Timesheet.id.desc())
            .offset(skip)
            .limit(page_size)
        )

        return {
            "page_index": page_index,
            "page_size": page_size,
            "count": total_count or 0,
            "data": timesheets.all()
        }

    async def generate_monthly_timesheets(self, reference: Optional[date] = None) -> List[Timesheet]:
        """Save last month's timesheet for every active employee that has none yet"""
        reference = reference or date.today()
        start_date, end_date = month_bounds(reference.replace(day=1) - timedelta(days=1))

        result = await self.session.execute(
            select(Employee).where(
                Employee.is_active == True,
                Employee.is_deleted == False
            ).order_by(Employee.employee_number)
        )
        employees = result.scalars().all()

        created = []
        for employee in employees:
            existing = await self.session.scalar(
                select(func.count(Timesheet.id)).where(
                    Timesheet.employee_id == employee.id,
                    Timesheet.start_date == start_date,
                    Timesheet.end_date == end_date,
                    Timesheet.is_deleted == False
                )
            )
            if existing:
                continue
            timesheet = await self.create_timesheet(
                TimesheetCreate(employee_id=employee.id, start_date=start_date, end_date=end_date)
            )
            created.append(timesheet)

        logger.info(f"Monthly timesheets for {start_date} - {end_date}: {len(created)} created")
        return created
