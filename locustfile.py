"""
Locust load tests for the donation relay.

Install: pip install locust
Run: locust -f locustfile.py --host=http://127.0.0.1:5050

For headless: locust -f locustfile.py --host=http://127.0.0.1:5050 \
    --users 10 --spawn-rate 2 --run-time 1m --headless

Charges are only exercised when LOCUST_CHARGE=1, and only make sense against
Stripe test keys (tok_visa is a Stripe test token).
"""

import os
from locust import HttpUser, task, between


class DonationRelayUser(HttpUser):
    wait_time = between(1, 3)

    @task(5)
    def ping(self):
        self.client.get("/ping")

    @task(3)
    def pubkey(self):
        self.client.get("/pubkey.js")

    @task(1)
    def charge(self):
        if os.getenv("LOCUST_CHARGE") != "1":
            return
        self.client.post(
            "/charge",
            data={
                "amount": "500",
                "token": "tok_visa",
                "email": "loadtest@example.com",
            },
        )
