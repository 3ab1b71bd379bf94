"""Base classes for notification channels.

Provides the abstract interface reminder delivery depends on, so the
transport (SMTP today) can be swapped or faked without changing call sites.
"""

from abc import ABC, abstractmethod


class NotifierError(Exception):
    """Raised when a notification could not be delivered to the transport."""


class Notifier(ABC):
    """Abstract base class for notification senders."""

    @abstractmethod
    def send(self, to: str, subject: str, html_body: str) -> None:
        """Send a single notification.

        :param to: Recipient address.
        :param subject: Message subject line.
        :param html_body: HTML message body.
        :raises NotifierError: If the message could not be handed to the transport.
        """
        ...
