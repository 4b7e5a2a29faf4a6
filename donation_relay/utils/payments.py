"""
Stripe charge boundary. create_charge never raises: every outcome comes back
as a ChargeOutcome the caller can branch on.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import stripe

from donation_relay.config import ServiceConfig
from donation_relay.models.charge import (
    CARD_DECLINED,
    PROCESSOR_ERROR,
    TRANSIENT_ERROR,
    ChargeOutcome,
    DonationRequest,
)

log = logging.getLogger(__name__)

# Failures that are not the processor's own fault (bad request, bad key, network).
TRANSIENT_ERRORS = (
    stripe.InvalidRequestError,
    stripe.AuthenticationError,
    stripe.APIConnectionError,
)


def configure_stripe(config: ServiceConfig) -> None:
    """Process-wide client settings: explicit timeout, no automatic retries."""
    stripe.max_network_retries = 0
    stripe.default_http_client = stripe.RequestsClient(timeout=config.stripe_timeout)


def _error_body(e: Exception, kind: str) -> Dict[str, Any]:
    json_body = getattr(e, "json_body", None)
    if isinstance(json_body, dict) and isinstance(json_body.get("error"), dict):
        return json_body["error"]
    message = getattr(e, "user_message", None) or str(e) or type(e).__name__
    err_type = "api_error" if kind == PROCESSOR_ERROR else "api_connection_error"
    return {"type": err_type, "message": message}


def _status(e: Exception, kind: str) -> int:
    status: Optional[int] = getattr(e, "http_status", None)
    if status:
        return int(status)
    return 502 if kind == TRANSIENT_ERROR else 500


def _failure(kind: str, e: Exception) -> ChargeOutcome:
    return ChargeOutcome(
        kind=kind,
        detail=str(e) or type(e).__name__,
        http_status=_status(e, kind),
        error_body=_error_body(e, kind),
    )


def create_charge(donation: DonationRequest, config: ServiceConfig) -> ChargeOutcome:
    try:
        charge = stripe.Charge.create(
            api_key=config.stripe_secret_key,
            amount=donation.amount,
            source=donation.token,
            receipt_email=donation.email,
            currency=config.currency,
            description=config.charge_description,
        )
    except stripe.CardError as e:
        return _failure(CARD_DECLINED, e)
    except TRANSIENT_ERRORS as e:
        return _failure(TRANSIENT_ERROR, e)
    except stripe.StripeError as e:
        return _failure(PROCESSOR_ERROR, e)
    except Exception as e:
        log.exception("[charge] unexpected error from the Stripe client")
        return _failure(PROCESSOR_ERROR, e)

    charge_id = charge.get("id") if hasattr(charge, "get") else getattr(charge, "id", None)
    return ChargeOutcome.success(charge_id=charge_id)
