"""
BookList Model

A named, owned, ordered collection of books plus the reviews written
about it.

Business Rules:
- A book appears at most once per booklist
- last_edited is refreshed by the service layer on every mutation
- Deleting a booklist deletes its reviews and book associations, and
  removes it from the owner's collection in the same transaction
"""

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.book import booklist_books

if TYPE_CHECKING:
    from app.models.book import Book
    from app.models.review import Review
    from app.models.user import User


class BookListVisibility(str, Enum):
    """Whether non-owners can discover the booklist."""
    PUBLIC = "public"
    PRIVATE = "private"


def utcnow() -> datetime:
    return datetime.now(UTC)


class BookList(Base):
    """
    BookList model.

    Table: booklists

    Attributes:
        id: Primary key
        name: Display name
        description: Optional short description
        visibility: "public" or "private"
        last_edited: When the list was last changed
        user_id: Owner (foreign key to users)

    Relationships:
        books: Many-to-Many with Book, in insertion order
        reviews: One-to-Many with Review, in creation order
        user: Many-to-One with User
    """

    __tablename__ = "booklists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    visibility: Mapped[str] = mapped_column(
        String(10),
        default=BookListVisibility.PUBLIC.value,
        nullable=False,
        index=True,
    )
    last_edited: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        index=True,
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="book_lists")
    books: Mapped[list["Book"]] = relationship(
        "Book",
        secondary=booklist_books,
        back_populates="booklists",
        order_by=booklist_books.c.id,
    )
    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="booklist",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )

    def __repr__(self) -> str:
        return f"<BookList(id={self.id}, name='{self.name}', user_id={self.user_id})>"
