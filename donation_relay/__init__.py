# donation_relay/__init__.py
import logging
from typing import Optional

from flask import Flask
from dotenv import load_dotenv

from donation_relay.config import ConfigError, ServiceConfig, load_config
from donation_relay.extensions import EXTENSION_KEY
from donation_relay.routes import admin_bp, charges_bp, core
from donation_relay.utils.payments import configure_stripe

__all__ = ["create_app", "ConfigError", "ServiceConfig", "load_config"]

log = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(config: Optional[ServiceConfig] = None) -> Flask:
    """
    Build the Flask app. Without an explicit config the environment (and a
    local .env) is read; an invalid environment raises ConfigError.
    """
    if config is None:
        load_dotenv(dotenv_path=".env")
        config = load_config()

    _configure_logging(config.log_level)
    configure_stripe(config)

    app = Flask(__name__)
    app.url_map.strict_slashes = False
    app.extensions[EXTENSION_KEY] = config

    app.register_blueprint(core)
    app.register_blueprint(charges_bp)
    app.register_blueprint(admin_bp)

    for rule in app.url_map.iter_rules():
        log.debug("route %-20s | endpoint=%s", rule, rule.endpoint)

    mode = "live" if config.stripe_secret_key.startswith("sk_live") else "test"
    log.info(
        "donation relay ready (stripe %s mode, email=%s, push=%s)",
        mode,
        "on" if config.email_configured else "off",
        "on" if config.push_configured else "off",
    )
    return app
