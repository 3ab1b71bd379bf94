"""Messaging module providing notification channel abstractions."""

from src.messaging.base import Notifier, NotifierError

__all__ = [
    "Notifier",
    "NotifierError",
]
