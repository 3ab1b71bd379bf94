"""Celery tasks for sending due reminders."""

import logging
from typing import Any

from celery import Celery, Task
from celery.schedules import crontab
from dotenv import load_dotenv

from src.database.connection import get_session_factory
from src.messaging.email import EmailClient
from src.orchestration.celery_app import celery_app
from src.reminders.service import ReminderService
from src.reminders.utils.config import get_reminder_settings

# DATABASE_URL and MAIL_ settings are read from the environment
load_dotenv()

logger = logging.getLogger(__name__)

# Default retry settings for tasks
DEFAULT_RETRY_KWARGS = {
    "max_retries": 3,
    "default_retry_delay": 30,
}


class BaseTask(Task):
    """Base task class with common retry and error handling."""

    autoretry_for = (Exception,)
    retry_backoff = True
    retry_backoff_max = 300  # Max 5 minutes between retries
    retry_jitter = True


def build_reminder_service() -> ReminderService:
    """Build a reminder service from environment configuration.

    :returns: A ReminderService using the process-wide store and SMTP settings.
    """
    return ReminderService(
        session_factory=get_session_factory(),
        notifier=EmailClient(),
        settings=get_reminder_settings(),
    )


@celery_app.task(
    bind=True,
    base=BaseTask,
    name="src.orchestration.tasks.check_reminders_task",
    **DEFAULT_RETRY_KWARGS,
)
def check_reminders_task(self: Task) -> dict[str, int | list[str]]:
    """Send every due, unsent reminder.

    :param self: The Celery task instance (bound).
    :returns: Dictionary with sweep statistics.
    """
    logger.info("Starting check reminders task")

    try:
        result = build_reminder_service().process_due_reminders()
    except Exception as exc:
        logger.exception(f"Check reminders failed: {exc}")
        raise

    stats: dict[str, int | list[str]] = {
        "processed_reminders": result.due,
        "sent": result.sent,
        "skipped": result.skipped,
        "failed": result.failed,
        "errors": result.errors,
    }

    logger.info(f"Check reminders complete: {stats}")
    return stats


# Beat schedule for periodic tasks
@celery_app.on_after_configure.connect
def setup_periodic_tasks(sender: Celery, **kwargs: Any) -> None:
    """Set up periodic tasks."""
    sender.add_periodic_task(
        crontab(minute="*"),
        check_reminders_task.s(),
        name="check-reminders",
    )
