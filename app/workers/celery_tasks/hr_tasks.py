"""
HR background tasks
"""
import asyncio
import logging
from datetime import date
from typing import Optional
from app.core.celery_app import celery_app
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create async engine for background tasks
async_engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    future=True,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

def run_async_task(coro):
    """Helper function to run async coroutines in Celery tasks"""
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        return loop.run_until_complete(coro)
    except Exception as e:
        logger.error(f"Error in async task: {e}")
        raise
    finally:
        loop.close()

@celery_app.task
def generate_monthly_timesheets(reference_date: Optional[str] = None):
    """Save the previous month's timesheet for every active employee"""
    async def _generate():
        async with async_session_maker() as db:
            # Import inside function to avoid circular imports
            from app.services.hr.timesheet_service import TimesheetService

            reference = date.fromisoformat(reference_date) if reference_date else None
            service = TimesheetService(db)
            timesheets = await service.generate_monthly_timesheets(reference)
            return f"Monthly timesheets generated: {len(timesheets)}"

    return run_async_task(_generate())
