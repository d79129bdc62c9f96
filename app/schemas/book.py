"""
Book Pydantic Schemas

Books arrive from the frontend in the external catalog's format
(camelCase keys such as subTitle, selfLink, imgSrc). The schemas keep
those wire names as aliases and expose snake_case attributes.

Schemas:
- BookCreate: Payload validated the first time a book is stored
- BookResponse: Book data returned by the API (also embedded in booklists)
- AddBookRequest / RemoveBookRequest: Request bodies of the book routes
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import RecordId


class BookBase(BaseModel):
    """Bibliographic fields shared by requests and responses."""

    title: str = Field(..., description="Book title", examples=["Dune"])
    sub_title: str | None = Field(default=None, alias="subTitle")
    authors: str = Field(..., description="Author names", examples=["Herbert"])
    description: str | None = Field(default=None)
    categories: str | None = Field(default=None)
    publisher: str | None = Field(default=None)
    published_date: str | None = Field(default=None, alias="publishedDate")
    page_count: str | None = Field(default=None, alias="pageCount")
    language: str | None = Field(default=None)
    sale_price: dict[str, Any] | None = Field(
        default=None,
        alias="salePrice",
        description="Price object as delivered by the catalog",
    )
    img_src: str | None = Field(default=None, alias="imgSrc")
    self_link: str | None = Field(
        default=None,
        alias="selfLink",
        description="External catalog identifier (deduplication key)",
        examples=["isbn:123"],
    )

    model_config = ConfigDict(populate_by_name=True)


class BookCreate(BookBase):
    """
    Schema for storing a new book.

    Example request body:
    {
        "selfLink": "isbn:123",
        "title": "Dune",
        "authors": "Herbert"
    }
    """

    title: str = Field(..., min_length=3, description="Book title", examples=["Dune"])
    sub_title: str | None = Field(default=None, min_length=3, alias="subTitle")
    description: str | None = Field(default=None, min_length=3)
    authors: str = Field(..., min_length=1, description="Author names", examples=["Herbert"])
    categories: str | None = Field(default=None, min_length=1)
    publisher: str | None = Field(default=None, min_length=1)
    published_date: str | None = Field(default=None, min_length=1, alias="publishedDate")
    page_count: str | None = Field(default=None, min_length=1, alias="pageCount")
    language: str | None = Field(default=None, min_length=1)
    img_src: str | None = Field(default=None, min_length=1, alias="imgSrc")
    self_link: str | None = Field(
        default=None,
        min_length=1,
        alias="selfLink",
        description="External catalog identifier (deduplication key)",
    )

    @field_validator("page_count", mode="before")
    @classmethod
    def page_count_to_string(cls, v: Any) -> Any:
        """The catalog sometimes sends pageCount as a number."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "subTitle": None,
                "authors": "Frank Herbert",
                "description": "Desert planet politics",
                "categories": "Fiction",
                "publisher": "Chilton Books",
                "publishedDate": "1965",
                "pageCount": "412",
                "language": "en",
                "salePrice": {"amount": 9.99, "currencyCode": "USD"},
                "imgSrc": None,
                "selfLink": "isbn:123",
            }
        },
    )


class AddBookRequest(BaseModel):
    """
    Body of POST /api/book/post-book-to-list.

    book_body is kept as a raw mapping: it is only validated against
    BookCreate when no book with the same selfLink exists yet.
    """

    book_list_id: RecordId = Field(..., alias="bookListId")
    book_body: dict[str, Any] = Field(..., alias="bookBody")

    model_config = ConfigDict(populate_by_name=True)


class RemoveBookRequest(BaseModel):
    """Body of DELETE /api/book/delete-book-from-list."""

    book_list_id: RecordId = Field(..., alias="bookListId")
    book_id: RecordId = Field(..., alias="bookId")

    model_config = ConfigDict(populate_by_name=True)
