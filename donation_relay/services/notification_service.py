"""
Operator notifications (Mailgun email, Pushover push).

Best effort: a single attempt per event, failures are logged and swallowed so
they can never change a response that has already been decided.
"""

from __future__ import annotations
import logging
from typing import Iterable, List

from donation_relay.config import ServiceConfig
from donation_relay.models.notification import (
    EMAIL,
    PUSH,
    SUCCESS,
    NotificationEvent,
)
from donation_relay.utils.email_sender import send_email
from donation_relay.utils.metrics import NOTIFICATIONS
from donation_relay.utils.push_sender import send_push

log = logging.getLogger(__name__)


def _toggle(config: ServiceConfig, event: NotificationEvent) -> bool:
    success = event.kind == SUCCESS
    if event.channel == EMAIL:
        return config.mail_on_success if success else config.mail_on_failure
    if event.channel == PUSH:
        return config.push_on_success if success else config.push_on_failure
    return False


def should_send(event: NotificationEvent, config: ServiceConfig) -> bool:
    """Credentials for the channel are complete and the toggle for this kind is on."""
    if event.channel == EMAIL and not config.email_configured:
        return False
    if event.channel == PUSH and not config.push_configured:
        return False
    return _toggle(config, event)


def dispatch(event: NotificationEvent, config: ServiceConfig) -> bool:
    """Send one event if it is enabled. Returns True only if the provider accepted it."""
    if not should_send(event, config):
        return False

    try:
        if event.channel == EMAIL:
            log.info("[email] sending to %s: %s", config.mailgun_to, event.subject)
            provider, msg_or_err = send_email(
                config, subject=event.subject, body_text=event.body
            )
        else:
            log.info("[push] sending notification: %s", event.subject)
            provider, msg_or_err = send_push(
                config, title=event.subject, message=event.body
            )
    except Exception as e:
        provider, msg_or_err = None, str(e)

    if provider is None:
        log.error("[%s] delivery failed: %s", event.channel, msg_or_err)
        NOTIFICATIONS.labels(channel=event.channel, result="failed").inc()
        return False

    NOTIFICATIONS.labels(channel=event.channel, result="sent").inc()
    return True


def send_notifications(events: Iterable[NotificationEvent], config: ServiceConfig) -> int:
    """Dispatch each event independently. Returns how many were delivered."""
    return sum(1 for event in events if dispatch(event, config))


def build_events(
    kind: str,
    *,
    email_subject: str,
    email_body: str,
    push_title: str,
    push_body: str,
) -> List[NotificationEvent]:
    return [
        NotificationEvent(channel=EMAIL, kind=kind, subject=email_subject, body=email_body),
        NotificationEvent(channel=PUSH, kind=kind, subject=push_title, body=push_body),
    ]
