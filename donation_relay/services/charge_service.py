from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple

from donation_relay.config import ServiceConfig
from donation_relay.models.charge import CARD_DECLINED, ChargeOutcome, DonationRequest
from donation_relay.models.notification import FAILURE, SUCCESS
from donation_relay.services.notification_service import build_events
from donation_relay.tasks import enqueue_notifications
from donation_relay.utils.metrics import CHARGES
from donation_relay.utils.payments import create_charge

log = logging.getLogger(__name__)

ANONYMOUS_DONOR = "an anonymous donor"


def display_amount(amount: Optional[str]) -> float:
    """
    Dollars for log and notification text only. Anything that isn't a number
    shows as 0.0; the raw amount is what goes to Stripe.
    """
    try:
        return round(float(amount) / 100, 2)
    except (TypeError, ValueError, OverflowError):
        return 0.0


def _notify_success(dollars: float, donor: str, config: ServiceConfig) -> None:
    events = build_events(
        SUCCESS,
        email_subject="You just got a donation!",
        email_body=(
            "Hey, just letting you know that you just got a donation of "
            f"${dollars} USD from {donor}!"
        ),
        push_title="Awesome news",
        push_body=f"You just received a donation of ${dollars} USD from {donor}!",
    )
    enqueue_notifications(events, config)


def _notify_failure(detail: str, config: ServiceConfig) -> None:
    text = f"Your donation server just had an error! {detail}"
    events = build_events(
        FAILURE,
        email_subject="Whoops!",
        email_body=text,
        push_title="Uh oh!",
        push_body=text,
    )
    enqueue_notifications(events, config)


def _safe_notify(fn, *args) -> None:
    try:
        fn(*args)
    except Exception:
        log.exception("[notify] dispatch raised; response unaffected")


def handle_charge(
    donation: DonationRequest, config: ServiceConfig
) -> Tuple[int, Dict[str, Any]]:
    """
    Charge the donation and decide the response.
    Returns (http_status, body); body is empty on success, otherwise Stripe's
    error object.
    """
    dollars = display_amount(donation.amount)
    donor = donation.email or ANONYMOUS_DONOR
    log.info("[charge] Got a donation request for $%s USD from %s.", dollars, donor)

    outcome: ChargeOutcome = create_charge(donation, config)
    CHARGES.labels(outcome=outcome.kind).inc()

    if outcome.ok:
        log.info("[charge] Donation successful! ($%s USD from %s)", dollars, donor)
        _safe_notify(_notify_success, dollars, donor, config)
        return 200, {}

    if outcome.kind == CARD_DECLINED:
        log.error(
            "[charge] Card was declined ($%s USD from %s): %s",
            dollars,
            donor,
            outcome.detail,
        )
        return outcome.http_status, outcome.error_body

    log.error(
        "[charge] An error occurred (%s, $%s USD from %s): %s",
        outcome.kind,
        dollars,
        donor,
        outcome.detail,
    )
    if outcome.alerting:
        _safe_notify(_notify_failure, outcome.detail, config)
    return outcome.http_status, outcome.error_body
