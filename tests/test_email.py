"""
Tests for Email Endpoints

Outbound mail is never really sent: resend.Emails.send is patched with
unittest.mock, and RESEND_API_KEY is switched on per test.
"""

from datetime import timedelta
from unittest.mock import patch

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import get_settings
from app.models import User
from app.services.security import create_access_token, create_email_verification_token

RESEND_SEND = "app.services.email.resend.Emails.send"


@pytest.fixture
def email_configured(monkeypatch):
    """Pretend a Resend API key is configured."""
    monkeypatch.setattr(get_settings(), "resend_api_key", "re_test_key")


class TestSendEmail:
    """Tests for POST /api/email/send"""

    def test_send_email(self, client: TestClient, email_configured):
        with patch(RESEND_SEND, return_value={"id": "msg_1"}) as send:
            response = client.post(
                "/api/email/send",
                json={"to": "a@x.com", "subject": "Hi", "html": "<p>Hello</p>"},
            )

        assert response.status_code == status.HTTP_200_OK
        send.assert_called_once()
        params = send.call_args.args[0]
        assert params["to"] == ["a@x.com"]
        assert params["subject"] == "Hi"
        assert params["html"] == "<p>Hello</p>"
        assert params["from"] == get_settings().email_from

    def test_send_email_transport_failure(self, client: TestClient, email_configured):
        with patch(RESEND_SEND, side_effect=RuntimeError("boom")):
            response = client.post(
                "/api/email/send",
                json={"to": "a@x.com", "subject": "Hi", "html": "<p>Hello</p>"},
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "boom" in response.json()["detail"]

    def test_send_email_not_configured(self, client: TestClient):
        with patch(RESEND_SEND) as send:
            response = client.post(
                "/api/email/send",
                json={"to": "a@x.com", "subject": "Hi", "html": "<p>Hello</p>"},
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == "Email service is not configured"
        send.assert_not_called()

    def test_send_email_invalid_recipient(self, client: TestClient, email_configured):
        response = client.post(
            "/api/email/send",
            json={"to": "nope", "subject": "Hi", "html": "<p>Hello</p>"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestSendVerification:
    """Tests for POST /api/email/send-verification"""

    def test_send_verification_link(
        self, client: TestClient, second_user: User, email_configured
    ):
        with patch(RESEND_SEND, return_value={"id": "msg_2"}) as send:
            response = client.post(
                "/api/email/send-verification",
                json={"email": "b@x.com"},
            )

        assert response.status_code == status.HTTP_200_OK
        params = send.call_args.args[0]
        assert params["to"] == ["b@x.com"]
        assert "/api/email/verify/" in params["html"]

    def test_send_verification_unknown_email(self, client: TestClient, email_configured):
        with patch(RESEND_SEND) as send:
            response = client.post(
                "/api/email/send-verification",
                json={"email": "nobody@x.com"},
            )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        send.assert_not_called()


class TestVerifyEmail:
    """Tests for GET /api/email/verify/{token}"""

    def test_verify_activates_user(
        self, client: TestClient, second_user: User, db_session: Session
    ):
        token = create_email_verification_token(second_user.id)

        response = client.get(f"/api/email/verify/{token}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Email verified successfully. You can now log in."
        db_session.refresh(second_user)
        assert second_user.is_active is True

    def test_verify_token_is_single_use(self, client: TestClient, second_user: User):
        token = create_email_verification_token(second_user.id)
        client.get(f"/api/email/verify/{token}")

        response = client.get(f"/api/email/verify/{token}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Invalid or expired verification token."

    def test_verify_expired_token(
        self, client: TestClient, second_user: User, db_session: Session
    ):
        token = create_email_verification_token(
            second_user.id, expires_delta=timedelta(minutes=-1)
        )

        response = client.get(f"/api/email/verify/{token}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        db_session.refresh(second_user)
        assert second_user.is_active is False

    def test_verify_rejects_raw_user_id(self, client: TestClient, second_user: User):
        """Knowing a user id is not enough to activate the account."""
        response = client.get(f"/api/email/verify/{second_user.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_verify_rejects_access_token(self, client: TestClient, second_user: User):
        token = create_access_token({"sub": str(second_user.id)})

        response = client.get(f"/api/email/verify/{token}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_verify_unknown_user(self, client: TestClient):
        token = create_email_verification_token(99999)

        response = client.get(f"/api/email/verify/{token}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
