"""Database model and operations for problem reminders."""

from src.database.reminders.models import Reminder
from src.database.reminders.operations import (
    DEFAULT_CLAIM_LEASE_MINUTES,
    claim_reminder,
    create_reminder,
    get_due_reminders,
    get_reminder_by_id,
    mark_reminder_sent,
    release_reminder_claim,
)

__all__ = [
    "DEFAULT_CLAIM_LEASE_MINUTES",
    # Models
    "Reminder",
    # Operations
    "claim_reminder",
    "create_reminder",
    "get_due_reminders",
    "get_reminder_by_id",
    "mark_reminder_sent",
    "release_reminder_claim",
]
