"""Database operations for problem reminders."""

from __future__ import annotations

import logging
import uuid as uuid_module
from datetime import UTC, datetime, timedelta

from sqlalchemy import ColumnElement, or_
from sqlalchemy.orm import Session

from src.database.reminders.models import Reminder

logger = logging.getLogger(__name__)

# Default minutes before an undelivered claim can be taken by another sweep
DEFAULT_CLAIM_LEASE_MINUTES = 15


def create_reminder(
    session: Session,
    email: str,
    problem_url: str,
    scheduled_for: datetime,
    problem_title: str | None = None,
) -> Reminder:
    """Create a new reminder.

    The record is flushed but not committed; the caller owns the transaction.

    :param session: Database session.
    :param email: Recipient email address.
    :param problem_url: URL of the problem to review.
    :param scheduled_for: When the reminder becomes due.
    :param problem_title: Optional display title for the problem.
    :returns: The created reminder.
    """
    reminder = Reminder(
        email=email,
        problem_url=problem_url,
        problem_title=problem_title,
        scheduled_for=scheduled_for,
        sent=False,
    )
    session.add(reminder)
    session.flush()
    logger.info(f"Created reminder: id={reminder.id}, scheduled_for={scheduled_for}")
    return reminder


def get_reminder_by_id(
    session: Session,
    reminder_id: uuid_module.UUID,
) -> Reminder | None:
    """Get a reminder by ID.

    :param session: Database session.
    :param reminder_id: Reminder ID.
    :returns: The reminder or None if not found.
    """
    return session.query(Reminder).filter(Reminder.id == reminder_id).first()


def _claim_is_free(now: datetime, claim_lease_minutes: int) -> ColumnElement[bool]:
    lease_cutoff = now - timedelta(minutes=claim_lease_minutes)
    return or_(Reminder.claimed_at.is_(None), Reminder.claimed_at <= lease_cutoff)


def get_due_reminders(
    session: Session,
    now: datetime | None = None,
    claim_lease_minutes: int = DEFAULT_CLAIM_LEASE_MINUTES,
) -> list[Reminder]:
    """Get reminders that are due and not yet sent.

    Reminders currently claimed by another sweep are left out until their
    claim lease has expired.

    :param session: Database session.
    :param now: Current time (defaults to now).
    :param claim_lease_minutes: Minutes after which an undelivered claim is ignored.
    :returns: Due reminders, oldest first.
    """
    if now is None:
        now = datetime.now(UTC)

    return (
        session.query(Reminder)
        .filter(
            Reminder.sent.is_(False),
            Reminder.scheduled_for <= now,
            _claim_is_free(now, claim_lease_minutes),
        )
        .order_by(Reminder.scheduled_for.asc())
        .all()
    )


def claim_reminder(
    session: Session,
    reminder_id: uuid_module.UUID,
    now: datetime | None = None,
    claim_lease_minutes: int = DEFAULT_CLAIM_LEASE_MINUTES,
) -> bool:
    """Claim a due reminder for delivery.

    A single conditional update, so of several concurrent sweeps exactly one
    sees the row change.

    :param session: Database session.
    :param reminder_id: Reminder ID to claim.
    :param now: Current time (defaults to now).
    :param claim_lease_minutes: Minutes after which an earlier claim may be taken over.
    :returns: True if this call claimed the reminder.
    """
    if now is None:
        now = datetime.now(UTC)

    updated = (
        session.query(Reminder)
        .filter(
            Reminder.id == reminder_id,
            Reminder.sent.is_(False),
            _claim_is_free(now, claim_lease_minutes),
        )
        .update({Reminder.claimed_at: now}, synchronize_session="fetch")
    )
    claimed = updated == 1
    logger.debug(f"Claim reminder: id={reminder_id}, claimed={claimed}")
    return claimed


def release_reminder_claim(
    session: Session,
    reminder_id: uuid_module.UUID,
) -> None:
    """Release the claim on an unsent reminder so the next sweep retries it.

    :param session: Database session.
    :param reminder_id: Reminder ID to release.
    """
    (
        session.query(Reminder)
        .filter(Reminder.id == reminder_id, Reminder.sent.is_(False))
        .update({Reminder.claimed_at: None}, synchronize_session="fetch")
    )
    logger.debug(f"Released reminder claim: id={reminder_id}")


def mark_reminder_sent(
    session: Session,
    reminder_id: uuid_module.UUID,
    now: datetime | None = None,
) -> bool:
    """Mark a reminder as sent.

    Only an unsent reminder changes, so ``sent`` flips at most once.

    :param session: Database session.
    :param reminder_id: Reminder ID.
    :param now: Current time (defaults to now).
    :returns: True if the reminder was updated, False if it was already sent or missing.
    """
    if now is None:
        now = datetime.now(UTC)

    updated = (
        session.query(Reminder)
        .filter(Reminder.id == reminder_id, Reminder.sent.is_(False))
        .update({Reminder.sent: True, Reminder.sent_at: now}, synchronize_session="fetch")
    )
    if updated:
        logger.info(f"Marked reminder sent: id={reminder_id}")
    else:
        logger.warning(f"Reminder not marked sent (already sent or missing): id={reminder_id}")
    return updated == 1
