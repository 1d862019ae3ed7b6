import pytest
from fastapi.testclient import TestClient

from app.api_service import app
from app.deps import get_notifier
from messaging.dispatcher import MessageDispatcher
from notification.sms import MISSING_CONFIGURATION, SmsNotification

from conftest import CapturingLogger, FakeSmsClient


@pytest.fixture
def sms():
    return FakeSmsClient(failing={"+15559990000"})


@pytest.fixture
def client(enabled_config, sms):
    notifier = SmsNotification(enabled_config, dispatcher=MessageDispatcher(sms), logger=CapturingLogger())
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_send_success(client, sms):
    r = client.post("/api/notifications/sms", json={"body": "hi", "phone_numbers": ["+15551112222"]})
    assert r.status_code == 200
    assert r.json() == {
        "status": "success",
        "ok": True,
        "detail": "SMS sent successfully to [+15551112222]",
        "cause": None,
    }
    assert sms.calls == [{"to_number": "+15551112222", "text": "hi"}]


def test_send_partial_failure_reports_cause(client):
    r = client.post(
        "/api/notifications/sms",
        json={"body": "hi", "phone_numbers": ["+15551112222", "+15559990000"], "email": "a@example.com"},
    )
    data = r.json()
    assert data["status"] == "failure"
    assert data["ok"] is False
    assert data["cause"].startswith("RuntimeError")


def test_missing_body_is_a_result_not_an_error(client, sms):
    r = client.post("/api/notifications/sms", json={"phone_numbers": ["+15551112222"]})
    assert r.status_code == 200
    assert r.json()["ok"] is False
    assert sms.calls == []


def test_invalid_payload_returns_request_id(client):
    r = client.post("/api/notifications/sms", json={"phone_numbers": "not-a-list"}, headers={"x-request-id": "rid-1"})
    assert r.status_code == 422
    assert r.json()["request_id"] == "rid-1"
    assert r.headers["X-Request-Id"] == "rid-1"


def test_request_id_generated(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-Id")


def test_health_reports_sms_enabled(client):
    data = client.get("/health").json()
    assert data["ok"] is True
    assert data["sms_enabled"] is True


def test_health_reports_missing_config(disabled_config):
    notifier = SmsNotification(disabled_config, logger=CapturingLogger())
    app.dependency_overrides[get_notifier] = lambda: notifier
    try:
        data = TestClient(app).get("/health").json()
        assert data["sms_enabled"] is False
        assert data["sms_missing"] == ["sms_twilio_token"]
        r = TestClient(app).post("/api/notifications/sms", json={"body": "hi", "phone_numbers": ["+15551112222"]})
        assert r.json()["detail"] == MISSING_CONFIGURATION
    finally:
        app.dependency_overrides.clear()


def test_unknown_route_returns_request_id(client):
    r = client.get("/nope", headers={"x-request-id": "rid-9"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Not Found"
    assert r.json()["request_id"] == "rid-9"


def test_wrong_method_returns_request_id(client):
    r = client.get("/api/notifications/sms", headers={"x-request-id": "rid-10"})
    assert r.status_code == 405
    assert r.json()["request_id"] == "rid-10"
    assert "POST" in r.headers["allow"]


class ExplodingNotifier:
    def send_notification(self, message, recipient):
        raise RuntimeError("provider exploded")


def test_unhandled_error_returns_500_with_request_id():
    app.dependency_overrides[get_notifier] = lambda: ExplodingNotifier()
    try:
        r = TestClient(app, raise_server_exceptions=False).post(
            "/api/notifications/sms",
            json={"body": "hi", "phone_numbers": ["+15551112222"]},
            headers={"x-request-id": "rid-500"},
        )
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json()["error"] == "internal_unhandled_exception"
    assert r.json()["request_id"] == "rid-500"
