"""
Background notification delivery via RQ (Redis Queue).

Enable with NOTIFY_USE_QUEUE=1.
Run worker: poetry run rq worker -u $REDIS_URL --with-scheduler
"""

from __future__ import annotations
import logging
from typing import List

from donation_relay.config import ServiceConfig
from donation_relay.models.notification import NotificationEvent
from donation_relay.services.notification_service import send_notifications, should_send

log = logging.getLogger(__name__)


def enqueue_notifications(events: List[NotificationEvent], config: ServiceConfig) -> bool:
    """
    Hand enabled events to the RQ worker.
    Returns True if enqueued, False if they were sent synchronously instead.
    """
    pending = [e for e in events if should_send(e, config)]
    if not pending:
        return False

    if not config.notify_use_queue:
        send_notifications(pending, config)
        return False

    try:
        from redis import Redis
        from rq import Queue

        conn = Redis.from_url(config.redis_url, decode_responses=False)
        q = Queue("default", connection=conn)
        q.enqueue(send_notifications, pending, config, job_timeout="2m")
        return True
    except Exception as e:
        # Fallback to sync if queue unavailable
        log.warning("[notify] RQ enqueue failed (%s), sending synchronously", e)
        send_notifications(pending, config)
        return False
