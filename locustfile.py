from locust import HttpUser, task, between
import os
import random
import uuid

SEGMENT_DEFINITIONS = [
    {"kind": "event_type_in_last_days", "eventType": "purchase", "days": 7},
    {"kind": "event_count_gte_in_last_days", "eventType": "page_view", "days": 10, "minCount": 3},
    {"kind": "event_property_equals", "eventType": "page_view", "path": "path", "value": "/pricing", "days": 30},
]


class EngagementUser(HttpUser):
    """Event producer that also previews segments"""

    wait_time = between(0.5, 2.5)

    def on_start(self):
        self.customer_count = int(os.getenv("LOCUST_CUSTOMERS", "1000"))

    @task(5)
    def record_event(self):
        email = f"customer{random.randint(0, self.customer_count)}@example.com"
        self.client.post(
            "/api/v1/events/",
            json={
                "email": email,
                "type": random.choice(["page_view", "added_to_cart", "purchase"]),
                "properties": {"path": "/pricing", "sku": "WIDGET-42"},
            },
            headers={"Idempotency-Key": str(uuid.uuid4())},
        )

    @task(1)
    def replay_event(self):
        # Same key twice; the second call must come back as a duplicate
        key = str(uuid.uuid4())
        payload = {"email": "replay@example.com", "type": "purchase"}
        self.client.post("/api/v1/events/", json=payload, headers={"Idempotency-Key": key})
        with self.client.post(
            "/api/v1/events/",
            json=payload,
            headers={"Idempotency-Key": key},
            catch_response=True,
        ) as resp:
            if resp.status_code == 200 and resp.json().get("created") is False:
                resp.success()
            else:
                resp.failure(f"Duplicate not detected: {resp.status_code}")

    @task(2)
    def preview_segment(self):
        self.client.post(
            "/api/v1/segments/preview/",
            json={"definition": random.choice(SEGMENT_DEFINITIONS)},
            name="/api/v1/segments/preview/",
        )

    @task(1)
    def list_campaigns(self):
        self.client.get("/api/v1/campaigns/")


# Useful for headless CSV output: `locust --headless -u 50 -r 5 -t 2m -f locustfile.py --csv out --host http://localhost:8000`
