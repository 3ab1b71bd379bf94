"""Service for scheduling problem reminders and sending the ones that are due."""

import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.database.connection import get_session
from src.database.reminders import (
    claim_reminder,
    create_reminder,
    get_due_reminders,
    mark_reminder_sent,
    release_reminder_claim,
)
from src.messaging.base import Notifier, NotifierError
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
)
from src.reminders.formatters import format_confirmation_email, format_due_reminder_email
from src.reminders.models import DueReminder, SetReminderResult, SweepResult
from src.reminders.utils.config import ReminderConfig

logger = logging.getLogger(__name__)

SET_REMINDER_FAILED = "Failed to set reminder"
PROCESS_REMINDERS_FAILED = "Failed to process reminders"


class ReminderService:
    """Schedules reminders and delivers them once due."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        notifier: Notifier,
        settings: ReminderConfig,
    ) -> None:
        """Initialise the reminder service.

        :param session_factory: Factory for reminder store sessions.
        :param notifier: Channel used to send confirmations and reminders.
        :param settings: Reminder settings.
        """
        self._session_factory = session_factory
        self._notifier = notifier
        self._settings = settings

    def set_reminder(
        self,
        email: str | None,
        problem_url: str | None,
        reminder_minutes: int | float | str | None,
        problem_title: str | None = None,
        now: datetime | None = None,
    ) -> SetReminderResult:
        """Schedule a reminder and email a confirmation.

        The reminder is written inside a transaction that only commits once
        the confirmation has been sent, so a failed confirmation leaves
        nothing behind.

        :param email: Recipient address.
        :param problem_url: URL of the problem.
        :param reminder_minutes: Delay as minutes or an expression like ``"2h"``.
        :param problem_title: Optional problem title.
        :param now: Current time (defaults to now).
        :returns: The stored reminder's ID and due time.
        :raises MissingFieldError: If a required field is absent or empty.
        :raises InvalidDurationError: If the delay is unparseable or not positive.
        :raises DispatchError: If the confirmation email could not be sent.
        :raises PersistenceError: If the reminder could not be stored.
        """
        if not email or not problem_url or not reminder_minutes:
            fields = {
                "email": email,
                "problemUrl": problem_url,
                "reminderMinutes": reminder_minutes,
            }
            raise MissingFieldError([name for name, value in fields.items() if not value])

        try:
            minutes = parse_reminder_duration(reminder_minutes)
        except InvalidFormatError as e:
            raise InvalidDurationError(reminder_minutes) from e

        if minutes <= 0:
            raise InvalidDurationError(reminder_minutes)

        if now is None:
            now = datetime.now(UTC)

        try:
            scheduled_for = calculate_scheduled_for(minutes, now)
            display = format_scheduled_for(scheduled_for, self._settings.display_zone)
        except OverflowError as e:
            raise InvalidDurationError(reminder_minutes) from e

        subject, body = format_confirmation_email(problem_url, problem_title, display)

        try:
            with get_session(self._session_factory) as session:
                reminder = create_reminder(
                    session,
                    email=email,
                    problem_url=problem_url,
                    problem_title=problem_title,
                    scheduled_for=scheduled_for,
                )
                reminder_id = reminder.id

                try:
                    self._notifier.send(email, subject, body)
                except NotifierError as e:
                    raise DispatchError(SET_REMINDER_FAILED) from e

        except SQLAlchemyError as e:
            raise PersistenceError(SET_REMINDER_FAILED) from e

        logger.info(f"Reminder set: id={reminder_id}, minutes={minutes}, due={scheduled_for}")

        return SetReminderResult(
            reminder_id=reminder_id,
            scheduled_for=scheduled_for,
            scheduled_for_display=display,
        )

    def process_due_reminders(self, now: datetime | None = None) -> SweepResult:
        """Send every due reminder and mark it sent.

        Each reminder is claimed, sent and marked in its own commits. A failure
        on one reminder is recorded and the sweep moves on to the next.

        :param now: Current time (defaults to now).
        :returns: Counts of due, sent, skipped and failed reminders.
        :raises PersistenceError: If the due reminders could not be fetched.
        """
        if now is None:
            now = datetime.now(UTC)

        result = SweepResult()

        try:
            with get_session(self._session_factory) as session:
                due = [
                    DueReminder(
                        reminder_id=reminder.id,
                        email=reminder.email,
                        problem_url=reminder.problem_url,
                        problem_title=reminder.problem_title,
                    )
                    for reminder in get_due_reminders(
                        session, now, self._settings.claim_lease_minutes
                    )
                ]
                result.due = len(due)
                logger.info(f"Found {result.due} due reminders")

                for reminder in due:
                    self._process_reminder(session, reminder, now, result)

        except SQLAlchemyError as e:
            raise PersistenceError(PROCESS_REMINDERS_FAILED) from e

        logger.info(
            f"Reminder sweep complete: {result.due} due, {result.sent} sent, "
            f"{result.skipped} skipped, {result.failed} failed"
        )

        return result

    def _process_reminder(
        self,
        session: Session,
        reminder: DueReminder,
        now: datetime,
        result: SweepResult,
    ) -> None:
        """Claim, send and mark a single due reminder.

        :param session: Database session.
        :param reminder: The due reminder.
        :param now: Sweep timestamp.
        :param result: Sweep stats to update.
        """
        reminder_id = reminder.reminder_id
        email = reminder.email
        subject, body = format_due_reminder_email(reminder.problem_url, reminder.problem_title)

        try:
            claimed = claim_reminder(session, reminder_id, now, self._settings.claim_lease_minutes)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            self._record_failure(result, f"Failed to claim reminder {reminder_id}: {e}")
            return

        if not claimed:
            logger.info(f"Skipping reminder claimed by another sweep: id={reminder_id}")
            result.skipped += 1
            return

        try:
            self._notifier.send(email, subject, body)
        except NotifierError as e:
            self._record_failure(result, f"Failed to send reminder {reminder_id}: {e}")
            self._release(session, reminder_id)
            return

        try:
            mark_reminder_sent(session, reminder_id, now)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            # Claim stays in place: the email went out, so only a lease expiry resends it
            self._record_failure(result, f"Sent reminder {reminder_id} but failed to mark it: {e}")
            return

        result.sent += 1

    def _release(self, session: Session, reminder_id: uuid.UUID) -> None:
        try:
            release_reminder_claim(session, reminder_id)
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            logger.exception(f"Failed to release claim on reminder {reminder_id}")

    @staticmethod
    def _record_failure(result: SweepResult, message: str) -> None:
        logger.exception(message)
        result.failed += 1
        result.errors.append(message)
