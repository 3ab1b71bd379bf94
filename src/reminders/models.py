"""Result models for reminder operations."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SetReminderResult:
    """Outcome of scheduling a reminder."""

    reminder_id: uuid.UUID
    scheduled_for: datetime
    scheduled_for_display: str


@dataclass
class SweepResult:
    """Stats for a due-reminder sweep.

    ``due`` counts the reminders fetched; each one ends up in exactly one of
    ``sent``, ``skipped`` (claimed by a concurrent sweep) or ``failed``.
    """

    due: int = 0
    sent: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DueReminder:
    """Plain copy of a due reminder's delivery fields.

    Read once after fetching so a rollback that expires the ORM rows does not
    trigger a refresh mid-sweep.
    """

    reminder_id: uuid.UUID
    email: str
    problem_url: str
    problem_title: str | None
