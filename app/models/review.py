"""
Review Model

Free-text reviews written about a booklist.

Business Rules:
- A review joins its booklist's reviews collection when it is created
  and never leaves it
- Reviews are never deleted through the API; "delete" sets the
  visibility to hidden
- Only public reviews are listed to readers
"""

from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class ReviewVisibility(str, Enum):
    PUBLIC = "public"
    HIDDEN = "hidden"


class Review(Base):
    """
    Review model for booklist reviews.

    Attributes:
        id: Primary key
        user_id: Foreign key to users table (the reviewer)
        booklist_id: Foreign key to booklists table
        review: Review text content
        visibility: "public" or "hidden"
        date: When the review was created
    """

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    booklist_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("booklists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    review: Mapped[str] = mapped_column(Text, nullable=False)
    visibility: Mapped[str] = mapped_column(
        String(10),
        default=ReviewVisibility.PUBLIC.value,
        nullable=False,
    )
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    user = relationship("User")
    booklist = relationship("BookList", back_populates="reviews")

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, booklist_id={self.booklist_id}, user_id={self.user_id})>"
