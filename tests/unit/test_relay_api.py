import asyncio

import aiosmtplib
import pytest
from fastapi.testclient import TestClient

from relay.api import notifications
from relay.main import app
from relay.services.email_service import EmailService


@pytest.fixture
def sent_mail(monkeypatch):
    calls = []

    async def _fake_send(receiver_email, subject, text_content, html_content=None):
        calls.append({"to": receiver_email, "subject": subject, "text": text_content})
        return True

    monkeypatch.setattr(notifications.email_service, "send_email", _fake_send)
    return calls


def test_relay_sends_to_client_and_copies_admin(sent_mail) -> None:
    client = TestClient(app)
    response = client.post("/api/send-email", json={
        "clientEmail": "c@x.com",
        "adminEmail": "studio@example.com",
        "projectTitle": "Logo",
        "description": "Action: approved",
        "action": "approved",
    })

    assert response.status_code == 200
    assert response.json() == {"status": "success"}
    assert [m["to"] for m in sent_mail] == ["c@x.com", "studio@example.com"]
    assert sent_mail[1]["subject"] == "Copy: " + sent_mail[0]["subject"]
    assert "Logo" in sent_mail[0]["text"]
    assert "Action: approved" in sent_mail[0]["text"]


def test_relay_reports_success_even_when_smtp_fails(monkeypatch) -> None:
    async def _failing_send(receiver_email, subject, text_content, html_content=None):
        return False

    monkeypatch.setattr(notifications.email_service, "send_email", _failing_send)
    response = TestClient(app).post("/api/send-email", json={"clientEmail": "c@x.com", "projectTitle": "Logo"})
    assert response.json() == {"status": "success"}


@pytest.mark.parametrize("body", [b"not json", b"", b"[]", b"{}"])
def test_unparseable_body_returns_error(sent_mail, body) -> None:
    response = TestClient(app).post("/api/send-email", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json()["status"] == "error"
    assert response.json()["message"]
    assert sent_mail == []


def test_missing_client_email_returns_error(sent_mail) -> None:
    response = TestClient(app).post("/api/send-email", json={"projectTitle": "Logo"})
    assert response.json()["status"] == "error"
    assert "clientEmail" in response.json()["message"]
    assert sent_mail == []


def test_cors_is_open() -> None:
    client = TestClient(app)
    preflight = client.options("/api/send-email", headers={
        "Origin": "https://portal.example",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "Content-Type",
    })
    assert preflight.status_code == 200
    assert preflight.headers["access-control-allow-origin"] == "*"


def test_email_service_reports_auth_failure(monkeypatch) -> None:
    async def _reject(*args, **kwargs):
        raise aiosmtplib.SMTPAuthenticationError(535, "bad credentials")

    monkeypatch.setattr(aiosmtplib, "send", _reject)
    service = EmailService(accounts=[{"email": "relay@example.com", "password": "x"}])

    assert asyncio.run(service.send_email("c@x.com", "Subject", "Body")) is False


def test_email_service_builds_plain_and_html_parts() -> None:
    service = EmailService(accounts=[{"email": "relay@example.com", "password": "x"}])
    message = service.build_message("relay@example.com", "c@x.com", "Design update", "Hello", "<p>Hello</p>")

    assert message["To"] == "c@x.com"
    assert "relay@example.com" in message["From"]
    assert [part.get_content_type() for part in message.get_payload()] == ["text/plain", "text/html"]


def test_null_title_and_description_are_sent_as_empty(sent_mail) -> None:
    response = TestClient(app).post("/api/send-email", json={
        "clientEmail": "c@x.com",
        "projectTitle": None,
        "description": None,
    })

    assert response.json() == {"status": "success"}
    assert [m["to"] for m in sent_mail] == ["c@x.com"]
    assert "None" not in sent_mail[0]["text"]
