"""API endpoints for scheduling and sending problem reminders."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_reminder_service, verify_cron_secret
from src.api.models import ErrorResponse
from src.api.reminders.models import (
    CheckRemindersResponse,
    SetReminderRequest,
    SetReminderResponse,
)
from src.reminders.service import ReminderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Reminders"])


@router.post(
    "/set-reminder",
    response_model=SetReminderResponse,
    summary="Set reminder",
    responses={400: {"model": ErrorResponse, "description": "Missing field or invalid time"}},
)
def set_reminder(
    request: SetReminderRequest,
    service: Annotated[ReminderService, Depends(get_reminder_service)],
) -> SetReminderResponse:
    """Schedule a reminder and email a confirmation.

    ``reminderMinutes`` accepts a number of minutes or a string with an
    optional ``m``/``h``/``d`` suffix.
    """
    start = time.perf_counter()
    logger.info(
        f"Set reminder: url={request.problem_url!r}, reminder_minutes={request.reminder_minutes!r}"
    )

    result = service.set_reminder(
        email=request.email,
        problem_url=request.problem_url,
        reminder_minutes=request.reminder_minutes,
        problem_title=request.problem_title,
    )

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"Set reminder complete: id={result.reminder_id}, "
        f"scheduled_for={result.scheduled_for.isoformat()}, elapsed={elapsed_ms:.0f}ms"
    )

    return SetReminderResponse(
        message="Reminder set successfully",
        scheduled_for=result.scheduled_for_display,
    )


@router.post(
    "/check-reminders",
    response_model=CheckRemindersResponse,
    summary="Send due reminders",
    dependencies=[Depends(verify_cron_secret)],
)
def check_reminders(
    service: Annotated[ReminderService, Depends(get_reminder_service)],
) -> CheckRemindersResponse:
    """Send every due, unsent reminder.

    Called by a scheduled trigger with the ``x-cron-secret`` header.
    """
    start = time.perf_counter()
    logger.info("Check reminders")

    result = service.process_due_reminders()

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"Check reminders complete: due={result.due}, sent={result.sent}, "
        f"failed={result.failed}, elapsed={elapsed_ms:.0f}ms"
    )

    return CheckRemindersResponse(
        processed_reminders=result.due,
        sent=result.sent,
        skipped=result.skipped,
        failed=result.failed,
    )
