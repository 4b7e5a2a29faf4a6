"""
Mailgun email sending wrapper.

Credentials come from ServiceConfig (MAILGUN_API_KEY, MAILGUN_DOMAIN,
MAILGUN_FROM_ADDR, MAILGUN_TO_ADDR). Messages always go to the operator
address; donors get their receipt from Stripe (receipt_email).
"""

from __future__ import annotations
from typing import Tuple, Optional

import requests

from donation_relay.config import ServiceConfig

MAILGUN_API_BASE = "https://api.mailgun.net/v3"


def send_email(
    config: ServiceConfig,
    *,
    subject: str,
    body_text: str,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Send an email via Mailgun.
    Returns (provider, provider_msg_id) or (None, error_message) on failure.
    """
    if not config.email_configured:
        return None, "Mailgun credentials not set"

    url = f"{MAILGUN_API_BASE}/{config.mailgun_domain}/messages"
    try:
        resp = requests.post(
            url,
            auth=("api", config.mailgun_api_key),
            data={
                "from": config.mailgun_from,
                "to": config.mailgun_to,
                "subject": subject,
                "text": body_text,
            },
            timeout=config.notify_timeout,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        return None, str(e)

    try:
        msg_id = (resp.json() or {}).get("id")
    except ValueError:
        msg_id = None
    return "mailgun", msg_id or str(resp.status_code)
