"""Problem reminder scheduling and delivery."""

from src.reminders.duration import (
    calculate_scheduled_for,
    format_scheduled_for,
    parse_reminder_duration,
)
from src.reminders.exceptions import (
    DispatchError,
    InvalidDurationError,
    InvalidFormatError,
    MissingFieldError,
    PersistenceError,
    ReminderError,
)
from src.reminders.models import DueReminder, SetReminderResult, SweepResult
from src.reminders.service import ReminderService
from src.reminders.utils.config import ReminderConfig, get_reminder_settings

__all__ = [
    "DispatchError",
    "DueReminder",
    "InvalidDurationError",
    "InvalidFormatError",
    "MissingFieldError",
    "PersistenceError",
    "ReminderConfig",
    "ReminderError",
    "ReminderService",
    "SetReminderResult",
    "SweepResult",
    "calculate_scheduled_for",
    "format_scheduled_for",
    "get_reminder_settings",
    "parse_reminder_duration",
]
