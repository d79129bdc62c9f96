"""
Catalog Service

Book records shared across booklists, deduplicated by selfLink.
"""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import (
    DuplicateError,
    NotFoundError,
    ValidationError,
    format_validation_error,
)
from app.models.book import Book
from app.models.booklist import utcnow
from app.schemas.book import BookCreate

logger = logging.getLogger(__name__)


def get_book(db: Session, book_id: int) -> Book:
    """Get a book by ID, or raise NotFoundError."""
    book = db.get(Book, book_id)
    if book is None:
        raise NotFoundError("Book not found")
    return book


def get_book_by_self_link(db: Session, self_link: str) -> Book | None:
    stmt = select(Book).where(Book.self_link == self_link)
    return db.execute(stmt).scalar_one_or_none()


def list_books(db: Session) -> list[Book]:
    """Every stored book, oldest first."""
    stmt = select(Book).order_by(Book.id)
    return list(db.execute(stmt).scalars().all())


def find_or_create_book(db: Session, payload: dict[str, Any]) -> Book:
    """
    Resolve a catalog payload to a stored book.

    An existing book with the same selfLink is reused as-is; the payload
    is only validated when a new row has to be inserted. The new row is
    added to the session but not committed, so that it commits together
    with whatever the caller does next.

    Raises:
        ValidationError: the payload does not satisfy BookCreate
        DuplicateError: the selfLink was stored concurrently
    """
    self_link = payload.get("selfLink", payload.get("self_link"))
    if isinstance(self_link, str):
        existing = get_book_by_self_link(db, self_link)
        if existing is not None:
            return existing

    try:
        data = BookCreate.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_error(e.errors())) from None

    book = Book(**data.model_dump())
    db.add(book)
    try:
        db.flush()
    except IntegrityError:
        # Another request stored the same selfLink first
        db.rollback()
        raise DuplicateError("Book already exists") from None

    logger.info(f"Book stored: {book.title} ({book.self_link})")
    return book


def delete_book(db: Session, book: Book) -> None:
    """
    Delete a book from the catalog and from every booklist holding it.

    Each affected booklist counts as edited.
    """
    book_id = book.id
    for booklist in list(book.booklists):
        booklist.books.remove(book)
        booklist.last_edited = utcnow()
    db.delete(book)
    db.commit()

    logger.info(f"Book {book_id} deleted from the catalog")
