"""Shared test fixtures: an in-memory reminder store and recording notifiers."""

from datetime import UTC, datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.database.core import Base
from src.database.reminders.models import Reminder
from src.messaging.base import Notifier
from src.messaging.email.client import EmailClientError
from src.reminders.utils.config import ReminderConfig


def create_test_session_factory() -> sessionmaker[Session]:
    """Create a session factory bound to a fresh in-memory SQLite database.

    :returns: Session factory with the reminders table created.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_test_settings(**overrides: object) -> ReminderConfig:
    """Create reminder settings that ignore the environment and .env file.

    :param overrides: Field values to set.
    :returns: Reminder settings.
    """
    values: dict[str, object] = {"cron_secret": "test-secret", "display_timezone": "UTC"}
    values.update(overrides)
    return ReminderConfig(_env_file=None, **values)  # type: ignore[arg-type]


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from SQLite."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def load_reminders(factory: sessionmaker[Session]) -> list[Reminder]:
    """Load every reminder from a fresh session.

    :param factory: Session factory.
    :returns: All stored reminders.
    """
    with factory() as session:
        return session.query(Reminder).order_by(Reminder.scheduled_for).all()


class RecordingNotifier(Notifier):
    """Notifier that records messages instead of sending them."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        """Initialise the notifier.

        :param fail_for: Recipient addresses whose sends raise EmailClientError.
        """
        self.messages: list[tuple[str, str, str]] = []
        self.fail_for = fail_for or set()

    def send(self, to: str, subject: str, html_body: str) -> None:
        """Record a message, or fail for configured recipients."""
        if to in self.fail_for:
            raise EmailClientError(f"SMTP error sending to {to}: mailbox unavailable")
        self.messages.append((to, subject, html_body))
