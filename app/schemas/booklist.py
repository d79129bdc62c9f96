"""
BookList Pydantic Schemas

Schemas:
- BookListCreate: Create a booklist for a user
- BookListUpdate: Partial update (name, description, visibility)
- BookListResponse: Booklist with owner, books and review summaries expanded

Validation rules mirror the registration form limits: names and
descriptions are 3-30 characters.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.booklist import BookListVisibility
from app.schemas.book import BookResponse
from app.schemas.common import RecordId
from app.schemas.review import ReviewSummary
from app.schemas.user import UserSummary


class BookListCreate(BaseModel):
    """
    Schema for creating a booklist.

    Example request body:
    {
        "name": "Sci-Fi",
        "description": "Space operas",
        "visibility": "public",
        "user": 1
    }
    """

    name: str = Field(..., min_length=3, max_length=30, examples=["Sci-Fi"])
    description: str | None = Field(default=None, min_length=3, max_length=30)
    visibility: BookListVisibility = Field(..., description="public or private")
    user: RecordId = Field(..., description="ID of the owning user")


class BookListUpdate(BaseModel):
    """
    Schema for updating a booklist.

    All fields are optional; only the ones sent are applied.
    """

    name: str | None = Field(default=None, min_length=3, max_length=30)
    description: str | None = Field(default=None, min_length=3, max_length=30)
    visibility: BookListVisibility | None = Field(default=None)


class BookListResponse(BaseModel):
    """
    Booklist with its references expanded.

    - user: owner summary
    - books: full book data, in the order they were added
    - reviews: review summaries, in creation order
    """

    id: int = Field(..., description="Unique booklist identifier")
    name: str
    description: str | None = None
    visibility: str
    last_edited: datetime = Field(..., description="When the list last changed")
    user: UserSummary
    books: list[BookResponse] = []
    reviews: list[ReviewSummary] = []

    model_config = ConfigDict(from_attributes=True)
