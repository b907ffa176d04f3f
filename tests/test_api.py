"""HTTP surface tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from payflow.services.processor.main import app, get_processor
from payflow.services.processor.schemas import GatewayResponse
from payflow.services.processor.wiring import build_processor
from tests.fakes import FakeGateway, RecordingNotifier


PAYLOAD = {
    "user_id": "user_123",
    "user_email": "john.doe@example.com",
    "amount": "99.99",
    "currency": "USD",
    "payment_token": "tok_visa_4242",
    "description": "Premium Subscription - Monthly",
}


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    processor = build_processor(gateway, RecordingNotifier())
    app.dependency_overrides[get_processor] = lambda: processor
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_create_payment(client):
    resp = client.post("/payments", json=PAYLOAD)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["transaction_id"] == "stripe_txn_abc123"
    assert "Amount: 99.99 USD" in body["receipt"]["formatted_receipt"]


def test_validation_failure_is_bad_request(client):
    resp = client.post("/payments", json={**PAYLOAD, "amount": "0"})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Amount must be greater than zero"
    assert client.get("/payments-stats").json() == {"total_processed": 0}


def test_decline_is_returned_as_result(client, gateway):
    gateway.response = GatewayResponse(success=False, error_message="Payment declined by bank")

    resp = client.post("/payments", json=PAYLOAD)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is False
    assert body["failure_kind"] == "declined"
    assert body["error_message"] == "Payment declined by bank"
    record = client.get(f"/payments/{body['payment_id']}").json()
    assert record["success"] is False


def test_lookup_and_stats(client):
    payment_id = client.post("/payments", json=PAYLOAD).json()["payment_id"]

    record = client.get(f"/payments/{payment_id}")

    assert record.status_code == 200
    assert record.json()["user_id"] == "user_123"
    assert client.get("/payments-stats").json() == {"total_processed": 1}


def test_unknown_payment(client):
    assert client.get("/payments/does-not-exist").status_code == 404


def test_health_and_metrics(client):
    client.post("/payments", json=PAYLOAD, headers={"x-correlation-id": "corr-1"})

    assert client.get("/health").json() == {"ok": True}
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "payment_requests_total" in metrics.text
