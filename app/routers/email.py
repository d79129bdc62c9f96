"""
Email Router

Public endpoints for outbound mail and account verification:
- POST /email/send: send an arbitrary HTML email
- POST /email/send-verification: email a verification link to a user
- GET /email/verify/{token}: activate the account the token belongs to
"""

import logging

from fastapi import APIRouter

from app.dependencies import DbSession
from app.exceptions import NotFoundError
from app.schemas.common import EmailRequest, MessageResponse, VerificationEmailRequest
from app.services import email as email_service
from app.services import users as user_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/email",
    tags=["Email"],
    responses={500: {"description": "Email transport failure"}},
)


@router.post(
    "/send",
    response_model=MessageResponse,
    summary="Send an email",
)
def send_email(data: EmailRequest) -> MessageResponse:
    email_service.send_email(data.to, data.subject, data.html)
    return MessageResponse(message="Verification email sent successfully.")


@router.post(
    "/send-verification",
    response_model=MessageResponse,
    summary="Send an account verification link",
    description="""
    Issue a signed verification token for the user registered with this
    email and send the verification link to that address.
    """,
    responses={404: {"description": "No user with this email"}},
)
def send_verification(data: VerificationEmailRequest, db: DbSession) -> MessageResponse:
    user = user_service.get_user_by_email(db, data.email)
    if user is None:
        raise NotFoundError("User not found.")

    token = user_service.issue_verification_token(user)
    email_service.send_verification_email(user.email, user.name, token)

    logger.info(f"Verification email sent to user {user.id}")
    return MessageResponse(message="Verification email sent successfully.")


@router.get(
    "/verify/{token}",
    response_model=MessageResponse,
    summary="Verify an email address",
    responses={400: {"description": "Invalid, expired or already used token"}},
)
def verify_email(token: str, db: DbSession) -> MessageResponse:
    user_service.verify_email(db, token)
    return MessageResponse(message="Email verified successfully. You can now log in.")
