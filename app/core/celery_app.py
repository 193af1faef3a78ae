from celery import Celery
from celery.schedules import crontab
from app.core.config import settings
import sys

# Create Celery app
celery_app = Celery(
    "attendance_backoffice",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=[
        "app.workers.celery_tasks.hr_tasks",
    ]
)

# Configure Celery
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone=settings.TIMEZONE,
    enable_utc=True,
    result_expires=3600,
)

# Windows-specific configuration
if sys.platform == 'win32':
    celery_app.conf.update(
        worker_pool='threads',
        worker_concurrency=4
    )

celery_app.conf.beat_schedule = {
    "generate-monthly-timesheets": {
        "task": "app.workers.celery_tasks.hr_tasks.generate_monthly_timesheets",
        "schedule": crontab(minute=0, hour=2, day_of_month=1),  # 02:00 on the 1st
    },
}
