"""Celery orchestration for the periodic due-reminder sweep.

Run a worker with beat: celery -A src.orchestration.celery_app worker --beat
"""

from src.orchestration.celery_app import celery_app
from src.orchestration.tasks import check_reminders_task

__all__ = [
    "celery_app",
    "check_reminders_task",
]
