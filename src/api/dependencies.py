"""Shared dependencies for API endpoints."""

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.database.connection import get_session_factory
from src.messaging.email import EmailClient
from src.reminders.service import ReminderService
from src.reminders.utils.config import ReminderConfig, get_reminder_settings

logger = logging.getLogger(__name__)


def get_cron_secret(settings: ReminderConfig) -> str:
    """Retrieve the shared sweep secret from settings.

    :param settings: Reminder settings.
    :returns: The configured secret.
    :raises ValueError: If CRON_SECRET is not set.
    """
    if not settings.cron_secret:
        raise ValueError("Cron secret not configured. Set CRON_SECRET environment variable.")
    return settings.cron_secret


def verify_cron_secret(
    settings: Annotated[ReminderConfig, Depends(get_reminder_settings)],
    x_cron_secret: Annotated[str | None, Header()] = None,
) -> None:
    """Verify the shared secret sent by the scheduled trigger.

    :param settings: Reminder settings.
    :param x_cron_secret: Value of the ``x-cron-secret`` header.
    :raises HTTPException: If the secret is missing or wrong (401), or not configured (500).
    """
    try:
        expected = get_cron_secret(settings)
    except ValueError as e:
        logger.error(f"Cron secret configuration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process reminders",
        ) from e

    if not x_cron_secret or not secrets.compare_digest(
        x_cron_secret.encode(), expected.encode()
    ):
        logger.warning("Check reminders called with invalid cron secret")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )


def get_reminder_service(
    settings: Annotated[ReminderConfig, Depends(get_reminder_settings)],
) -> ReminderService:
    """Build the reminder service from the process-wide store and SMTP settings.

    :param settings: Reminder settings.
    :returns: A ReminderService ready to handle one request.
    """
    return ReminderService(
        session_factory=get_session_factory(),
        notifier=EmailClient(),
        settings=settings,
    )
