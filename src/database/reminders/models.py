"""SQLAlchemy ORM model for problem reminders."""

import uuid as uuid_module
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.database.core import Base

# Maximum length of title to show in repr
REPR_TITLE_MAX_LENGTH = 50


class Reminder(Base):
    """ORM model for a scheduled problem reminder.

    Becomes due once ``scheduled_for`` has passed. A sweep claims the record,
    emails it, then flips ``sent`` to true. Records are never deleted.
    """

    __tablename__ = "reminders"

    id: Mapped[uuid_module.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_module.uuid4,
    )
    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    problem_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    problem_title: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    scheduled_for: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    sent: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    claimed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    __table_args__ = (Index("idx_reminders_sent_scheduled_for", "sent", "scheduled_for"),)

    def __repr__(self) -> str:
        """Return string representation of the reminder."""
        title = self.problem_title or self.problem_url
        if len(title) > REPR_TITLE_MAX_LENGTH:
            title = title[:REPR_TITLE_MAX_LENGTH] + "..."
        return (
            f"<Reminder(id={self.id}, title={title!r}, "
            f"scheduled_for={self.scheduled_for}, sent={self.sent})>"
        )
