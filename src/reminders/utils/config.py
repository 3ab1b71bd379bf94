"""Configuration for reminder scheduling using pydantic-settings."""

from functools import cached_property, lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class ReminderConfig(BaseSettings):
    """Configuration for reminder intake and the due-reminder sweep.

    :param cron_secret: Shared secret expected in the ``x-cron-secret`` header.
    :param display_timezone: IANA timezone used when showing due times to users.
    :param claim_lease_minutes: Minutes before an undelivered claim may be retried.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    cron_secret: str | None = Field(
        default=None,
        validation_alias="CRON_SECRET",
        description="Shared secret for the check-reminders endpoint",
    )
    display_timezone: str = Field(
        default="UTC",
        validation_alias="REMINDER_DISPLAY_TIMEZONE",
        description="Timezone for formatted due times",
    )
    claim_lease_minutes: int = Field(
        default=15,
        ge=1,
        le=1440,
        validation_alias="REMINDER_CLAIM_LEASE_MINUTES",
        description="Minutes a sweep holds a claimed reminder before it can be retried",
    )

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        """Validate that the display timezone is a known IANA zone.

        :param v: Raw timezone name from environment.
        :returns: The validated name.
        :raises ValueError: If the zone cannot be loaded.
        """
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @cached_property
    def display_zone(self) -> ZoneInfo:
        """Get the display timezone as a ZoneInfo."""
        return ZoneInfo(self.display_timezone)


@lru_cache
def get_reminder_settings() -> ReminderConfig:
    """Get cached reminder settings.

    :returns: Configured ReminderConfig instance.
    """
    return ReminderConfig()
