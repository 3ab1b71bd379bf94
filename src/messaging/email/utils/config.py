"""Configuration for outbound email using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class EmailConfig(BaseSettings):
    """Configuration for the SMTP transport.

    All settings are loaded from environment variables with the MAIL_ prefix.

    :param host: SMTP server hostname.
    :param port: SMTP server port.
    :param user: Username for SMTP authentication (optional).
    :param password: Password for SMTP authentication (optional).
    :param use_tls: Whether to upgrade the connection with STARTTLS.
    :param from_address: Sender address. Defaults to ``user``.
    :param timeout: Socket timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAIL_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(..., description="SMTP server hostname")
    port: int = Field(default=587, ge=1, le=65535, description="SMTP server port")
    user: str | None = Field(default=None, description="SMTP username")
    password: str | None = Field(default=None, description="SMTP password")
    use_tls: bool = Field(default=True, description="Use STARTTLS")
    from_address: str | None = Field(default=None, description="Sender address")
    timeout: int = Field(default=30, ge=1, le=300, description="Socket timeout in seconds")

    @model_validator(mode="after")
    def validate_sender(self) -> "EmailConfig":
        """Default the sender to the SMTP user and require one of them.

        :returns: The validated config.
        :raises ValueError: If neither MAIL_FROM_ADDRESS nor MAIL_USER is set.
        """
        if self.from_address is None:
            self.from_address = self.user
        if not self.from_address:
            raise ValueError(
                "No sender address configured. Set MAIL_FROM_ADDRESS or MAIL_USER."
            )
        if self.user and not self.password:
            raise ValueError("MAIL_PASSWORD must be set when MAIL_USER is configured.")
        return self


@lru_cache
def get_email_settings() -> EmailConfig:
    """Get cached email settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured EmailConfig instance.
    """
    return EmailConfig()  # type: ignore[call-arg]
