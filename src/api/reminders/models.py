"""Pydantic models for reminders API endpoints."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class SetReminderRequest(BaseModel):
    """Request model for scheduling a reminder.

    Fields are optional here so that absent values are reported as missing
    fields by the reminder service rather than as schema errors.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(None, description="Recipient email address")
    problem_url: str | None = Field(None, alias="problemUrl", description="Problem URL")
    problem_title: str | None = Field(None, alias="problemTitle", description="Problem title")
    # Strict so JSON booleans are not coerced to 0 or 1
    reminder_minutes: StrictBool | StrictInt | StrictFloat | StrictStr | None = Field(
        None,
        alias="reminderMinutes",
        description='Delay in minutes, or a string such as "30m", "2h" or "1d"',
    )


class SetReminderResponse(BaseModel):
    """Response model for a scheduled reminder."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, description="Whether the reminder was set")
    message: str = Field(..., description="Status message")
    scheduled_for: str = Field(..., alias="scheduledFor", description="Formatted due time")


class CheckRemindersResponse(BaseModel):
    """Response model for a due-reminder sweep."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, description="Whether the sweep ran")
    processed_reminders: int = Field(
        ...,
        alias="processedReminders",
        description="Number of due reminders found",
    )
    sent: int = Field(..., description="Reminders sent and marked sent")
    skipped: int = Field(..., description="Reminders claimed by a concurrent sweep")
    failed: int = Field(..., description="Reminders that failed and will be retried")
