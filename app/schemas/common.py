"""
Shared Pydantic Schemas

Small request/response bodies used by more than one router.
"""

from typing import Annotated

from pydantic import BaseModel, EmailStr, Field

# Largest value a BIGINT primary key can hold
MAX_RECORD_ID = 2**63 - 1

RecordId = Annotated[int, Field(ge=1, le=MAX_RECORD_ID)]


class MessageResponse(BaseModel):
    """Plain confirmation returned by endpoints without a resource body."""

    message: str = Field(..., examples=["Book added to the list successfully"])


class EmailRequest(BaseModel):
    """Body of POST /api/email/send."""

    to: EmailStr = Field(..., description="Recipient address")
    subject: str = Field(..., min_length=1, max_length=255)
    html: str = Field(..., min_length=1, description="HTML message body")


class VerificationEmailRequest(BaseModel):
    """Body of POST /api/email/send-verification."""

    email: EmailStr = Field(..., description="Address of the account to verify")
