#!/usr/bin/env python3
"""
Manual API smoke test for donation-relay.

Usage:
  poetry run python scripts/test_api.py [--base URL] [--charge]

  Ensure the server is running first (with Stripe *test* keys):
    PORT=5050 poetry run python run.py

  --charge also submits real test-mode charges using Stripe's test tokens
  (tok_visa succeeds, tok_chargeDeclined is declined).
"""
import argparse
import json
import sys
from urllib.parse import urlencode
from urllib.request import Request, urlopen
from urllib.error import HTTPError, URLError

BASE = "http://127.0.0.1:5050"


def req(method: str, path: str, form=None) -> tuple[str, dict, int]:
    url = f"{BASE.rstrip('/')}{path}"
    headers = {}
    body = None
    if form is not None:
        headers["Content-Type"] = "application/x-www-form-urlencoded"
        body = urlencode(form).encode()
    try:
        r = urlopen(Request(url, data=body, headers=headers, method=method), timeout=30)
        return r.read().decode(), dict(r.headers), r.status
    except HTTPError as e:
        text = e.read().decode() if e.fp else ""
        return text, dict(e.headers or {}), e.code
    except URLError as e:
        print(f"Connection error: {e}")
        return "", {}, 0


def main():
    global BASE
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--base", default=BASE, help="Base URL (default: http://127.0.0.1:5050)"
    )
    ap.add_argument("--charge", action="store_true", help="submit test-mode charges")
    args = ap.parse_args()
    BASE = args.base.rstrip("/")

    ok = 0
    fail = 0

    # 1. Ping
    print("1. Ping ...")
    text, _, code = req("GET", "/ping")
    if code != 200:
        print(f"   FAIL {code} {text}")
        fail += 1
        sys.exit(1)
    print("   OK")
    ok += 1

    # 2. Public key script
    print("2. GET /pubkey.js ...")
    text, headers, code = req("GET", "/pubkey.js")
    if code != 200 or not text.startswith("var ") or '"pk_' not in text:
        print(f"   FAIL {code} {text!r}")
        fail += 1
    else:
        print(f"   OK {text} (CORS {headers.get('Access-Control-Allow-Origin')})")
        ok += 1

    if args.charge:
        # 3. Successful test charge
        print("3. Charge with tok_visa ...")
        text, _, code = req(
            "POST",
            "/charge",
            {"amount": "500", "token": "tok_visa", "email": "smoke@example.com"},
        )
        if code != 200:
            print(f"   FAIL {code} {text}")
            fail += 1
        else:
            print("   OK charged $5.00")
            ok += 1

        # 4. Declined test charge
        print("4. Charge with tok_chargeDeclined ...")
        text, _, code = req(
            "POST",
            "/charge",
            {
                "amount": "500",
                "token": "tok_chargeDeclined",
                "email": "smoke@example.com",
            },
        )
        try:
            err = json.loads(text) if text else {}
        except json.JSONDecodeError:
            err = {}
        if code != 402 or err.get("type") != "card_error":
            print(f"   FAIL expected 402 card_error, got {code} {text}")
            fail += 1
        else:
            print(f"   OK declined: {err.get('message')}")
            ok += 1

    # Summary
    print(f"\n--- {ok} passed, {fail} failed ---")
    sys.exit(1 if fail else 0)


if __name__ == "__main__":
    main()
