from __future__ import annotations

import pytest
import stripe

from donation_relay import create_app
from donation_relay.config import ServiceConfig
from donation_relay.services import notification_service


def make_config(**overrides) -> ServiceConfig:
    values = dict(
        stripe_public_key="pk_test_XXX",
        stripe_secret_key="sk_test_XXX",
        charge_description="Test donation",
        mailgun_api_key="key-123",
        mailgun_domain="mg.example.com",
        mailgun_from="relay@example.com",
        mailgun_to="owner@example.com",
        mail_on_success=True,
        mail_on_failure=True,
        pushover_user_key="user-123",
        pushover_app_token="token-123",
        push_on_success=True,
        push_on_failure=True,
    )
    values.update(overrides)
    return ServiceConfig(**values)


@pytest.fixture
def config() -> ServiceConfig:
    return make_config()


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sent(monkeypatch):
    """Records every provider call made by the notification dispatcher."""
    calls: list[tuple[str, str, str]] = []

    def fake_email(config, *, subject, body_text):
        calls.append(("email", subject, body_text))
        return "mailgun", "msg-1"

    def fake_push(config, *, title, message):
        calls.append(("push", title, message))
        return "pushover", "req-1"

    monkeypatch.setattr(notification_service, "send_email", fake_email)
    monkeypatch.setattr(notification_service, "send_push", fake_push)
    return calls


@pytest.fixture
def charge_calls(monkeypatch):
    """Stripe succeeds by default; set charge_calls.error to make it raise."""

    class Recorder(list):
        error: Exception | None = None

    calls = Recorder()

    def fake_create(**kwargs):
        calls.append(kwargs)
        if calls.error is not None:
            raise calls.error
        return {"id": "ch_test_1", "object": "charge", "paid": True}

    monkeypatch.setattr(stripe.Charge, "create", fake_create)
    return calls


def card_declined() -> stripe.CardError:
    body = {
        "error": {
            "type": "card_error",
            "code": "card_declined",
            "decline_code": "generic_decline",
            "message": "Your card was declined.",
        }
    }
    return stripe.CardError(
        "Your card was declined.",
        None,
        "card_declined",
        http_status=402,
        json_body=body,
    )


def api_error() -> stripe.APIError:
    body = {"error": {"type": "api_error", "message": "Something went wrong on Stripe's end."}}
    return stripe.APIError(
        "Something went wrong on Stripe's end.", http_status=500, json_body=body
    )


def invalid_request() -> stripe.InvalidRequestError:
    body = {
        "error": {
            "type": "invalid_request_error",
            "param": "amount",
            "message": "Invalid integer: abc",
        }
    }
    return stripe.InvalidRequestError(
        "Invalid integer: abc", "amount", http_status=400, json_body=body
    )


def bad_api_key() -> stripe.AuthenticationError:
    body = {
        "error": {
            "type": "invalid_request_error",
            "message": "Invalid API Key provided: sk_test_****XXX",
        }
    }
    return stripe.AuthenticationError(
        "Invalid API Key provided: sk_test_****XXX", http_status=401, json_body=body
    )
