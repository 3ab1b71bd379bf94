"""Celery application for the periodic due-reminder sweep."""

import os

from celery import Celery

from src.observability.sentry import init_sentry
from src.utils.logging import configure_logging

configure_logging()
init_sentry()

# Broker and result backend
REDIS_URL = os.environ["REDIS_URL"]

REMINDERS_QUEUE = "problem_reminders"

# A sweep that outlives this is killed; the claim lease lets the next one retry its rows
SWEEP_TIME_LIMIT_SECONDS = 600

celery_app = Celery(
    "problem_reminders",
    broker=REDIS_URL,
    backend=REDIS_URL,
    include=["src.orchestration.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_default_queue=REMINDERS_QUEUE,
    task_default_routing_key=REMINDERS_QUEUE,
    task_routes={
        "src.orchestration.tasks.check_reminders_task": {"queue": REMINDERS_QUEUE},
    },
    # Redeliver a sweep whose worker died mid-run
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_time_limit=SWEEP_TIME_LIMIT_SECONDS,
    task_soft_time_limit=SWEEP_TIME_LIMIT_SECONDS - 30,
    # Only the latest sweep stats are of interest
    result_expires=3600,
    # One sweep at a time per worker
    worker_prefetch_multiplier=1,
    worker_concurrency=1,
    worker_hijack_root_logger=False,
    worker_redirect_stdouts=False,
    broker_connection_retry_on_startup=True,
)
