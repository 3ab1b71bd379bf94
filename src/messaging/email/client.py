"""SMTP client for sending HTML email notifications."""

import logging
import smtplib
from email.message import EmailMessage

from src.messaging.base import Notifier, NotifierError
from src.messaging.email.utils.config import EmailConfig, get_email_settings

logger = logging.getLogger(__name__)


class EmailClientError(NotifierError):
    """Raised when an email could not be sent."""


class EmailClient(Notifier):
    """Notifier that delivers HTML email over SMTP.

    A new SMTP connection is opened for every message, so one instance can be
    shared between requests.
    """

    def __init__(self, settings: EmailConfig | None = None) -> None:
        """Initialise the email client.

        :param settings: SMTP settings. Defaults to settings loaded from environment.
        """
        self._settings = settings or get_email_settings()
        logger.debug(
            f"EmailClient initialised: host={self._settings.host}, port={self._settings.port}, "
            f"tls={self._settings.use_tls}"
        )

    @property
    def from_address(self) -> str:
        """Get the configured sender address."""
        return self._settings.from_address or ""

    def build_message(self, to: str, subject: str, html_body: str) -> EmailMessage:
        """Build a MIME message for an HTML body.

        :param to: Recipient address.
        :param subject: Subject line.
        :param html_body: HTML body.
        :returns: The assembled message.
        """
        message = EmailMessage()
        message["From"] = self.from_address
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")
        return message

    def send(self, to: str, subject: str, html_body: str) -> None:
        """Send an HTML email.

        :param to: Recipient address.
        :param subject: Subject line.
        :param html_body: HTML body.
        :raises EmailClientError: If the SMTP conversation fails.
        """
        message = self.build_message(to, subject, html_body)
        settings = self._settings

        logger.info(f"Sending email: to={to}, subject={subject!r}")

        try:
            with smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout) as smtp:
                if settings.use_tls:
                    smtp.starttls()
                if settings.user and settings.password:
                    smtp.login(settings.user, settings.password)
                smtp.send_message(message)

        except smtplib.SMTPException as e:
            raise EmailClientError(f"SMTP error sending to {to}: {e}") from e
        except OSError as e:
            raise EmailClientError(
                f"Could not reach SMTP server {settings.host}:{settings.port}: {e}"
            ) from e

        logger.info(f"Email sent successfully: to={to}")
