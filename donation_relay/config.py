"""
Service configuration, resolved once at startup.

Configure via env (a local .env is loaded by create_app / run.py):
- STRIPE_KEYS: "<PUBKEY>:<SECRETKEY>" (required)
- STRIPE_CHARGE_DESC: description attached to every charge
- CORS_ACCEPT_DOMAIN: Access-Control-Allow-Origin value (default: "*")
- JAVASCRIPT_PUBKEY_NAME: variable name served by /pubkey.js (default: "stripe_pubkey")
- PUSHOVER_USER_KEY, PUSHOVER_APP_TOKEN, PUSHOVER_DEVICE
- PUSH_ON_SUCCESS (default: 0), PUSH_ON_FAILURE (default: 1)
- MAILGUN_API_KEY, MAILGUN_DOMAIN, MAILGUN_FROM_ADDR, MAILGUN_TO_ADDR
- MAIL_ON_SUCCESS (default: 0), MAIL_ON_FAILURE (default: 1)
- STRIPE_TIMEOUT_SECONDS (default: 30), NOTIFY_TIMEOUT_SECONDS (default: 10)
- NOTIFY_USE_QUEUE (default: 0), REDIS_URL
- LOG_LEVEL (default: INFO)
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

PUBLIC_KEY_PREFIXES = ("pk_test", "pk_live")
SECRET_KEY_PREFIXES = ("sk_test", "sk_live")

DEFAULT_CORS_ORIGIN = "*"
DEFAULT_JS_PUBKEY_NAME = "stripe_pubkey"
DEFAULT_REDIS_URL = "redis://127.0.0.1:6379/0"
CURRENCY = "usd"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when the environment cannot produce a usable ServiceConfig."""


@dataclass(frozen=True)
class ServiceConfig:
    stripe_public_key: str
    stripe_secret_key: str
    charge_description: Optional[str] = None
    currency: str = CURRENCY
    cors_origin: str = DEFAULT_CORS_ORIGIN
    js_pubkey_name: str = DEFAULT_JS_PUBKEY_NAME

    mailgun_api_key: Optional[str] = None
    mailgun_domain: Optional[str] = None
    mailgun_from: Optional[str] = None
    mailgun_to: Optional[str] = None
    mail_on_success: bool = False
    mail_on_failure: bool = True

    pushover_user_key: Optional[str] = None
    pushover_app_token: Optional[str] = None
    pushover_device: Optional[str] = None
    push_on_success: bool = False
    push_on_failure: bool = True

    stripe_timeout: float = 30.0
    notify_timeout: float = 10.0
    notify_use_queue: bool = False
    redis_url: str = DEFAULT_REDIS_URL
    log_level: str = "INFO"

    @property
    def email_configured(self) -> bool:
        return all(
            (
                self.mailgun_api_key,
                self.mailgun_from,
                self.mailgun_to,
                self.mailgun_domain,
            )
        )

    @property
    def push_configured(self) -> bool:
        return bool(self.pushover_user_key and self.pushover_app_token)


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    # Empty values count as unset.
    val = (env.get(name) or "").strip()
    return val or None


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _get(env, name)
    if raw is None:
        return default
    low = raw.lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ConfigError(
        f"{name} must be one of 1/true/yes/on or 0/false/no/off (got {raw!r})"
    )


def _seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = _get(env, name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds (got {raw!r})")
    if val <= 0:
        raise ConfigError(f"{name} must be positive (got {raw!r})")
    return val


def _split_stripe_keys(raw: Optional[str]) -> tuple[str, str]:
    if raw is None:
        raise ConfigError("STRIPE_KEYS must be set.")

    parts = raw.split(":")
    if len(parts) != 2:
        raise ConfigError("STRIPE_KEYS must be of the form '<PUBKEY>:<SECRETKEY>'")

    public_key, secret_key = (p.strip() for p in parts)
    if not public_key.startswith(PUBLIC_KEY_PREFIXES):
        raise ConfigError("Public key must start with 'pk_test' or 'pk_live'")
    if not secret_key.startswith(SECRET_KEY_PREFIXES):
        raise ConfigError("Secret key must start with 'sk_test' or 'sk_live'")
    return public_key, secret_key


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServiceConfig:
    """
    Build a ServiceConfig from the environment (or the given mapping).
    Raises ConfigError describing the first invalid setting.
    """
    env = os.environ if environ is None else environ
    public_key, secret_key = _split_stripe_keys(_get(env, "STRIPE_KEYS"))

    return ServiceConfig(
        stripe_public_key=public_key,
        stripe_secret_key=secret_key,
        charge_description=_get(env, "STRIPE_CHARGE_DESC"),
        cors_origin=_get(env, "CORS_ACCEPT_DOMAIN") or DEFAULT_CORS_ORIGIN,
        js_pubkey_name=_get(env, "JAVASCRIPT_PUBKEY_NAME") or DEFAULT_JS_PUBKEY_NAME,
        mailgun_api_key=_get(env, "MAILGUN_API_KEY"),
        mailgun_domain=_get(env, "MAILGUN_DOMAIN"),
        mailgun_from=_get(env, "MAILGUN_FROM_ADDR"),
        mailgun_to=_get(env, "MAILGUN_TO_ADDR"),
        mail_on_success=_flag(env, "MAIL_ON_SUCCESS", False),
        mail_on_failure=_flag(env, "MAIL_ON_FAILURE", True),
        pushover_user_key=_get(env, "PUSHOVER_USER_KEY"),
        pushover_app_token=_get(env, "PUSHOVER_APP_TOKEN"),
        pushover_device=_get(env, "PUSHOVER_DEVICE"),
        push_on_success=_flag(env, "PUSH_ON_SUCCESS", False),
        push_on_failure=_flag(env, "PUSH_ON_FAILURE", True),
        stripe_timeout=_seconds(env, "STRIPE_TIMEOUT_SECONDS", 30.0),
        notify_timeout=_seconds(env, "NOTIFY_TIMEOUT_SECONDS", 10.0),
        notify_use_queue=_flag(env, "NOTIFY_USE_QUEUE", False),
        redis_url=_get(env, "REDIS_URL") or DEFAULT_REDIS_URL,
        log_level=(_get(env, "LOG_LEVEL") or "INFO").upper(),
    )
