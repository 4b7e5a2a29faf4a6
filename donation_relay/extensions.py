from flask import current_app

from donation_relay.config import ServiceConfig

EXTENSION_KEY = "donation_relay"


def get_config() -> ServiceConfig:
    """The ServiceConfig the running app was created with."""
    return current_app.extensions[EXTENSION_KEY]
