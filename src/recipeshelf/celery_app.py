"""Celery application configuration for background task processing."""

import os

from celery import Celery
from celery.schedules import crontab

from recipeshelf.config import get_settings

settings = get_settings()

celery_app = Celery(
    "recipeshelf",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["recipeshelf.tasks.imports"],
)

celery_app.conf.update(
    # Task settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    # Task execution settings
    task_acks_late=True,  # Acknowledge after task completes (for reliability)
    task_reject_on_worker_lost=True,  # Requeue if worker dies
    worker_prefetch_multiplier=1,  # Imports are long and sequential
    # Result settings
    result_expires=86400 * 7,  # Import reports are kept for 7 days
    # Beat scheduler settings
    beat_schedule={
        "nightly-unparsed-flag-repair": {
            "task": "recipeshelf.tasks.imports.fix_unparsed_flags_task",
            "schedule": crontab(hour=3, minute=0),
            "options": {"queue": "imports"},
        },
    },
    # Queue routing
    task_routes={
        "recipeshelf.tasks.imports.*": {"queue": "imports"},
    },
    # Logging
    worker_hijack_root_logger=False,
)

if os.name == "nt":
    celery_app.conf.update(
        worker_pool="solo",  # Use solo pool on Windows
    )
