"""
Review Pydantic Schemas

Schemas:
- ReviewCreate: Create a new review for a booklist
- ReviewHideRequest: Hide ("delete") a review
- ReviewResponse: Review as stored (reviewer and booklist by id)
- ReviewPublicResponse: Review with the reviewer expanded
- ReviewSummary: Minimal review info embedded in booklist responses

Business Rules:
- Review text must be at least 3 characters
- Hidden reviews are never listed to readers
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.common import RecordId
from app.schemas.user import UserSummary


class ReviewCreate(BaseModel):
    """
    Schema for creating a new review.

    Example request body:
    {
        "user": 1,
        "booklist": 3,
        "review": "Great picks!"
    }
    """

    user: RecordId = Field(..., description="ID of the reviewer")
    booklist: RecordId = Field(..., description="ID of the reviewed booklist")
    review: str = Field(
        ...,
        min_length=3,
        max_length=5000,
        description="Review text content",
        examples=["A fantastic selection of classics."],
    )


class ReviewHideRequest(BaseModel):
    review_id: RecordId = Field(..., alias="reviewId")

    model_config = ConfigDict(populate_by_name=True)


class ReviewSummary(BaseModel):
    """
    Review info embedded in booklist responses.

    The body is left out so that a hidden review's text never leaks
    through a public booklist listing.
    """

    id: int
    visibility: str
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewResponse(BaseModel):
    """Schema for review responses from the write endpoints."""

    id: int = Field(..., description="Unique review identifier")
    review: str = Field(..., description="Review text content")
    visibility: str = Field(..., description="public or hidden")
    date: datetime = Field(..., description="When the review was created")
    user_id: int = Field(
        ...,
        validation_alias=AliasChoices("user_id", "user"),
        serialization_alias="user",
        description="ID of the reviewer",
    )
    booklist_id: int = Field(
        ...,
        validation_alias=AliasChoices("booklist_id", "booklist"),
        serialization_alias="booklist",
        description="ID of the reviewed booklist",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "review": "A must-read collection!",
                "visibility": "public",
                "date": "2024-01-15T10:30:00Z",
                "user": 7,
                "booklist": 3,
            }
        },
    )


class ReviewPublicResponse(BaseModel):
    """Review with the reviewer expanded, as listed to readers."""

    id: int
    review: str
    visibility: str
    date: datetime
    user: UserSummary
    booklist_id: int = Field(
        ...,
        validation_alias=AliasChoices("booklist_id", "booklist"),
        serialization_alias="booklist",
    )

    model_config = ConfigDict(from_attributes=True)
