"""Root conftest: shared test configuration and fixtures."""

import os

# Configure the app for tests before anything under leasedesk is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["EMAIL_SUPPRESS_SEND"] = "true"
os.environ["PAYSTACK_SECRET_KEY"] = ""
os.environ["WEB_DIR"] = os.path.join(os.path.dirname(__file__), "no-web-dir")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import hashlib
import hmac
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from leasedesk.main import app
from leasedesk.database.init import Base, SessionLocal, engine
from leasedesk.routes import invitation_routes, payment_routes, webhook_routes

WEBHOOK_SECRET = "sk_test_webhook"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(autouse=True)
def mock_email(monkeypatch):
    """Outgoing mail is recorded instead of sent."""
    invite = AsyncMock()
    receipt = AsyncMock()
    monkeypatch.setattr(invitation_routes.email_service, "send_invitation_email", invite)
    monkeypatch.setattr(webhook_routes.email_service, "send_payment_receipt_email", receipt)
    return SimpleNamespace(invite=invite, receipt=receipt)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def session_for(data):
    return {
        "id": data["user"]["id"],
        "email": data["user"]["email"],
        "token": data["access_token"],
        "refresh_token": data["refresh_token"],
        "headers": {"Authorization": f"Bearer {data['access_token']}"},
    }


@pytest.fixture
def signup(client):
    def _signup(email, role="landlord", full_name="Test User", password="secret123", phone=None):
        response = client.post(
            "/api/v1/auth/signup",
            json={
                "email": email,
                "password": password,
                "full_name": full_name,
                "role": role,
                "phone": phone,
            },
        )
        assert response.status_code == 201, response.text
        return session_for(response.json()["data"])

    return _signup


@pytest.fixture
def landlord(signup):
    return signup("landlord@example.com", "landlord", "Lola Adeyemi")


@pytest.fixture
def other_landlord(signup):
    return signup("other.landlord@example.com", "landlord", "Tunde Bakare")


@pytest.fixture
def building(client, landlord):
    response = client.post(
        "/api/v1/buildings",
        json={"name": "Palm Court", "address": "12 Admiralty Way, Lekki", "total_units": 4},
        headers=landlord["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def unit(client, landlord, building):
    response = client.post(
        "/api/v1/units",
        json={
            "building_id": building["id"],
            "unit_number": "A1",
            "rent_amount": 15000000,
            "lease_start": "2026-01-15",
            "lease_end": "2026-12-31",
        },
        headers=landlord["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def invitation(client, landlord, unit):
    response = client.post(
        "/api/v1/invitations",
        json={"unit_id": unit["id"], "email": "tenant@example.com"},
        headers=landlord["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def tenant(client, invitation):
    response = client.post(
        "/api/v1/auth/accept-invite",
        json={
            "token": invitation["token"],
            "full_name": "Ada Okafor",
            "email": "tenant@example.com",
            "password": "tenantpass",
            "phone": "+2348012345678",
        },
    )
    assert response.status_code == 201, response.text
    return session_for(response.json()["data"])


def sign(raw, secret=WEBHOOK_SECRET):
    return hmac.new(secret.encode(), raw, hashlib.sha512).hexdigest()


@pytest.fixture
def paystack_event(client):
    """
    Post a Paystack webhook event.

    The server holds WEBHOOK_SECRET only for the duration of the request,
    so payment initialization elsewhere in a test never reaches Paystack.
    Pass ``signed_with=None`` to send the event unsigned, or another key
    to forge the signature.
    """
    def _post(event, reference, signed_with=WEBHOOK_SECRET, **data):
        raw = json.dumps({"event": event, "data": {"reference": reference, **data}}).encode()
        headers = {"Content-Type": "application/json"}
        if signed_with:
            headers["x-paystack-signature"] = sign(raw, signed_with)

        configured = payment_routes.paystack_service.secret_key
        payment_routes.paystack_service.secret_key = WEBHOOK_SECRET
        try:
            return client.post("/api/v1/webhooks/paystack", content=raw, headers=headers)
        finally:
            payment_routes.paystack_service.secret_key = configured

    return _post
