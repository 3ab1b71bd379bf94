"""Email notification channel."""

from src.messaging.email.client import EmailClient, EmailClientError
from src.messaging.email.utils.config import EmailConfig, get_email_settings

__all__ = [
    "EmailClient",
    "EmailClientError",
    "EmailConfig",
    "get_email_settings",
]
