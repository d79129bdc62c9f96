"""
Email service using the Resend API

Outbound mail is sent inline and awaited; there is no queue and no retry.
Any transport failure surfaces to the caller as InternalError (500).
"""

import logging
from html import escape

import resend

from app.config import get_settings
from app.exceptions import InternalError

logger = logging.getLogger(__name__)
settings = get_settings()

VERIFICATION_SUBJECT = "Verify your email address"


def send_email(to: str, subject: str, html: str) -> str | None:
    """
    Send one HTML email from EMAIL_FROM.

    Returns:
        The Resend message id, when the API returns one

    Raises:
        InternalError: RESEND_API_KEY is unset or Resend rejected the message
    """
    if not settings.resend_api_key:
        logger.error("Email send requested but RESEND_API_KEY is not set")
        raise InternalError("Email service is not configured")

    resend.api_key = settings.resend_api_key
    email_data = {
        "from": settings.email_from,
        "to": [to],
        "subject": subject,
        "html": html,
    }

    try:
        result = resend.Emails.send(email_data)
    except Exception as e:
        logger.error(f"Email sending failed: {e}")
        raise InternalError(f"Error sending verification email. {e}") from e

    # The SDK has returned both objects and plain dicts across versions
    if isinstance(result, dict):
        message_id = result.get("id")
    else:
        message_id = getattr(result, "id", None)

    logger.info(f"Email sent via Resend - ID: {message_id}, To: {to}")
    return message_id


def build_verification_link(token: str) -> str:
    return settings.email_verification_url.format(token=token)


def send_verification_email(to: str, name: str, token: str) -> str | None:
    """Send the account verification link to a newly registered user."""
    link = build_verification_link(token)
    html = (
        f"<p>Hi {escape(name)},</p>"
        "<p>Please confirm your email address to activate your account:</p>"
        f'<p><a href="{escape(link)}">Verify my email</a></p>'
        f"<p>The link expires in {settings.email_verification_expire_hours} hours.</p>"
    )
    return send_email(to, VERIFICATION_SUBJECT, html)
