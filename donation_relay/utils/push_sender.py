"""
Pushover push notification wrapper.
"""

from __future__ import annotations
from typing import Tuple, Optional

import requests

from donation_relay.config import ServiceConfig

PUSHOVER_API_URL = "https://api.pushover.net/1/messages.json"
DASHBOARD_URL = "https://dashboard.stripe.com"
DASHBOARD_URL_TITLE = "Visit your Stripe Dashboard"


def send_push(
    config: ServiceConfig,
    *,
    title: str,
    message: str,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Send a push notification via Pushover, linking to the Stripe dashboard.
    Returns (provider, request_id) or (None, error_message) on failure.
    """
    if not config.push_configured:
        return None, "Pushover credentials not set"

    data = {
        "token": config.pushover_app_token,
        "user": config.pushover_user_key,
        "title": title,
        "message": message,
        "url": DASHBOARD_URL,
        "url_title": DASHBOARD_URL_TITLE,
    }
    if config.pushover_device:
        data["device"] = config.pushover_device

    try:
        resp = requests.post(PUSHOVER_API_URL, data=data, timeout=config.notify_timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        return None, str(e)

    try:
        request_id = (resp.json() or {}).get("request")
    except ValueError:
        request_id = None
    return "pushover", request_id or str(resp.status_code)
