"""Tests for reminder database operations."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock
from uuid import uuid4

from src.database.reminders.models import Reminder
from src.database.reminders.operations import (
    DEFAULT_CLAIM_LEASE_MINUTES,
    claim_reminder,
    create_reminder,
    get_due_reminders,
    get_reminder_by_id,
    mark_reminder_sent,
    release_reminder_claim,
)
from testing.fixtures import as_utc, create_test_session_factory

NOW = datetime(2026, 10, 16, 12, 0, tzinfo=UTC)


class TestCreateReminder(unittest.TestCase):
    """Tests for create_reminder operation."""

    def test_creates_unsent_reminder(self) -> None:
        """Test creating a reminder with required fields."""
        mock_session = MagicMock()
        scheduled_for = NOW + timedelta(hours=1)

        reminder = create_reminder(
            session=mock_session,
            email="coder@example.com",
            problem_url="https://leetcode.com/problems/two-sum/",
            scheduled_for=scheduled_for,
        )

        self.assertEqual(reminder.email, "coder@example.com")
        self.assertEqual(reminder.problem_url, "https://leetcode.com/problems/two-sum/")
        self.assertIsNone(reminder.problem_title)
        self.assertEqual(reminder.scheduled_for, scheduled_for)
        self.assertFalse(reminder.sent)
        mock_session.add.assert_called_once_with(reminder)
        mock_session.flush.assert_called_once()

    def test_does_not_commit(self) -> None:
        """Test that the caller keeps control of the transaction."""
        mock_session = MagicMock()

        create_reminder(
            session=mock_session,
            email="coder@example.com",
            problem_url="https://leetcode.com/problems/two-sum/",
            scheduled_for=NOW,
            problem_title="Two Sum",
        )

        mock_session.commit.assert_not_called()


class TestGetReminderById(unittest.TestCase):
    """Tests for get_reminder_by_id operation."""

    def test_returns_reminder_when_found(self) -> None:
        """Test that the reminder is returned when found."""
        mock_session = MagicMock()
        reminder = Reminder(
            id=uuid4(),
            email="coder@example.com",
            problem_url="https://leetcode.com/problems/two-sum/",
            scheduled_for=NOW,
        )
        mock_session.query.return_value.filter.return_value.first.return_value = reminder

        result = get_reminder_by_id(mock_session, reminder.id)

        self.assertEqual(result, reminder)

    def test_returns_none_when_not_found(self) -> None:
        """Test that None is returned when the reminder does not exist."""
        mock_session = MagicMock()
        mock_session.query.return_value.filter.return_value.first.return_value = None

        self.assertIsNone(get_reminder_by_id(mock_session, uuid4()))


class _StoreTestCase(unittest.TestCase):
    """Base class providing an in-memory reminder store."""

    def setUp(self) -> None:
        """Set up a session on a fresh in-memory database."""
        self.session = create_test_session_factory()()
        self.addCleanup(self.session.close)

    def _add(self, scheduled_for: datetime, *, sent: bool = False) -> Reminder:
        reminder = create_reminder(
            self.session,
            email="coder@example.com",
            problem_url="https://leetcode.com/problems/two-sum/",
            scheduled_for=scheduled_for,
        )
        reminder.sent = sent
        self.session.commit()
        return reminder


class TestGetDueReminders(_StoreTestCase):
    """Tests for get_due_reminders operation."""

    def test_returns_past_unsent_reminders_oldest_first(self) -> None:
        """Test that due reminders are returned in schedule order."""
        newer = self._add(NOW - timedelta(minutes=1))
        older = self._add(NOW - timedelta(hours=1))

        result = get_due_reminders(self.session, NOW)

        self.assertEqual([r.id for r in result], [older.id, newer.id])

    def test_excludes_sent_and_future_reminders(self) -> None:
        """Test that sent and not-yet-due reminders are left out."""
        self._add(NOW - timedelta(days=1), sent=True)
        self._add(NOW + timedelta(seconds=1))

        self.assertEqual(get_due_reminders(self.session, NOW), [])

    def test_excludes_reminders_with_live_claim(self) -> None:
        """Test that a reminder claimed within the lease is not due."""
        reminder = self._add(NOW - timedelta(minutes=5))
        claim_reminder(self.session, reminder.id, NOW)
        self.session.commit()

        self.assertEqual(get_due_reminders(self.session, NOW + timedelta(minutes=1)), [])

    def test_includes_reminders_with_expired_claim(self) -> None:
        """Test that a reminder whose claim lease ran out is due again."""
        reminder = self._add(NOW - timedelta(minutes=5))
        claim_reminder(self.session, reminder.id, NOW)
        self.session.commit()

        later = NOW + timedelta(minutes=DEFAULT_CLAIM_LEASE_MINUTES)
        result = get_due_reminders(self.session, later)

        self.assertEqual([r.id for r in result], [reminder.id])


class TestClaimReminder(_StoreTestCase):
    """Tests for claim_reminder operation."""

    def test_first_claim_wins(self) -> None:
        """Test that only one of two claims on the same reminder succeeds."""
        reminder = self._add(NOW - timedelta(minutes=1))

        first = claim_reminder(self.session, reminder.id, NOW)
        second = claim_reminder(self.session, reminder.id, NOW)

        self.assertTrue(first)
        self.assertFalse(second)
        self.assertEqual(as_utc(reminder.claimed_at), NOW)

    def test_expired_claim_can_be_taken_over(self) -> None:
        """Test that a claim older than the lease can be claimed again."""
        reminder = self._add(NOW - timedelta(minutes=1))
        claim_reminder(self.session, reminder.id, NOW, claim_lease_minutes=5)

        later = NOW + timedelta(minutes=5)
        self.assertTrue(claim_reminder(self.session, reminder.id, later, claim_lease_minutes=5))

    def test_sent_reminder_cannot_be_claimed(self) -> None:
        """Test that a sent reminder is never claimed."""
        reminder = self._add(NOW - timedelta(minutes=1), sent=True)

        self.assertFalse(claim_reminder(self.session, reminder.id, NOW))

    def test_missing_reminder_cannot_be_claimed(self) -> None:
        """Test that claiming an unknown ID fails."""
        self.assertFalse(claim_reminder(self.session, uuid4(), NOW))


class TestReleaseReminderClaim(_StoreTestCase):
    """Tests for release_reminder_claim operation."""

    def test_release_makes_reminder_claimable(self) -> None:
        """Test that a released reminder can be claimed again at once."""
        reminder = self._add(NOW - timedelta(minutes=1))
        claim_reminder(self.session, reminder.id, NOW)

        release_reminder_claim(self.session, reminder.id)

        self.assertIsNone(reminder.claimed_at)
        self.assertTrue(claim_reminder(self.session, reminder.id, NOW))


class TestMarkReminderSent(_StoreTestCase):
    """Tests for mark_reminder_sent operation."""

    def test_marks_unsent_reminder(self) -> None:
        """Test that an unsent reminder is flipped to sent."""
        reminder = self._add(NOW - timedelta(minutes=1))

        updated = mark_reminder_sent(self.session, reminder.id, NOW)

        self.assertTrue(updated)
        self.assertTrue(reminder.sent)
        self.assertEqual(as_utc(reminder.sent_at), NOW)

    def test_sent_flag_flips_only_once(self) -> None:
        """Test that marking twice leaves the first sent_at in place."""
        reminder = self._add(NOW - timedelta(minutes=1))
        mark_reminder_sent(self.session, reminder.id, NOW)

        updated = mark_reminder_sent(self.session, reminder.id, NOW + timedelta(hours=1))

        self.assertFalse(updated)
        self.assertEqual(as_utc(reminder.sent_at), NOW)


if __name__ == "__main__":
    unittest.main()
