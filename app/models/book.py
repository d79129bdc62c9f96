"""
Book Model

Catalog entries shared by every booklist that references them.

Books are keyed logically by self_link, the identifier of the record in
the external catalog the frontend searches. A book row is created the
first time any booklist references that self_link and reused afterwards.

This file also contains the booklist_books association table.

WHY an id column on the association table?
==========================================
A booklist's books are an ordered collection. The surrogate id grows
with every insert, so ordering by it returns books in the order they
were added. The unique constraint makes "no duplicate book in a list"
a database guarantee as well as a service check.
"""

from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.booklist import BookList


# =============================================================================
# Association Table
# =============================================================================

booklist_books = Table(
    "booklist_books",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "booklist_id",
        Integer,
        ForeignKey("booklists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    UniqueConstraint("booklist_id", "book_id", name="uq_booklist_book"),
    comment="Ordered association between booklists and their books",
)


class Book(Base):
    """
    Book model representing catalog entries.

    Table: books

    Bibliographic fields are free-form strings as delivered by the
    external catalog; only title and authors are required. sale_price is
    stored as JSON because the catalog sends it as an object
    (amount + currency code).

    Relationships:
    - booklists: Many-to-Many (one book can sit in many booklists)
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(String(500), index=True, nullable=False)
    sub_title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    authors: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    categories: Mapped[str | None] = mapped_column(String(500), nullable=True)
    publisher: Mapped[str | None] = mapped_column(String(255), nullable=True)
    published_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    page_count: Mapped[str | None] = mapped_column(String(20), nullable=True)
    language: Mapped[str | None] = mapped_column(String(20), nullable=True)
    sale_price: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    img_src: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Deduplication key; NULLs are allowed and never collide
    self_link: Mapped[str | None] = mapped_column(
        String(500),
        unique=True,
        index=True,
        nullable=True,
        comment="External catalog identifier used to deduplicate books"
    )

    booklists: Mapped[list["BookList"]] = relationship(
        "BookList",
        secondary=booklist_books,
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', self_link='{self.self_link}')"
