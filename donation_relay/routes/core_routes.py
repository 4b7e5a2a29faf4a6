import logging

from flask import Blueprint, Response

from donation_relay.config import ServiceConfig
from donation_relay.extensions import get_config

core = Blueprint("core", __name__)
log = logging.getLogger(__name__)


def pubkey_script(config: ServiceConfig) -> str:
    return f'var {config.js_pubkey_name} = "{config.stripe_public_key}";'


@core.get("/pubkey.js")
def pubkey():
    config = get_config()
    resp = Response(pubkey_script(config), mimetype="text/javascript")
    resp.headers["Access-Control-Allow-Origin"] = config.cors_origin
    return resp


@core.get("/ping")
def ping():
    log.info("Ping received.")
    return "", 200
