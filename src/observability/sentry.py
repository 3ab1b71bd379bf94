"""Setup Sentry."""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.celery import CeleryIntegration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from src import __version__


def init_sentry() -> bool:
    """Initialise Sentry error reporting when SENTRY_DSN is configured.

    :returns: True if Sentry was initialised.
    """
    dsn = os.environ.get("SENTRY_DSN")
    if not dsn:
        return False

    # Capture ERROR logs as events, and keep INFO+ as breadcrumbs
    logging_integration = LoggingIntegration(
        level=logging.INFO,  # breadcrumbs
        event_level=logging.ERROR,  # events
    )

    sentry_sdk.init(
        dsn=dsn,
        integrations=[
            FastApiIntegration(),
            CeleryIntegration(),
            logging_integration,
        ],
        environment=os.environ.get("APP_ENV", "local"),
        release=f"problem-reminders@{__version__}",
        # Recipient addresses stay out of events
        send_default_pii=False,
        traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
    )
    return True
