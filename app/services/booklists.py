"""
BookList Service

Create, read, edit and delete booklists and manage the books in them.

Every write refreshes the booklist's last_edited timestamp and commits
once, so a booklist and the rows it references (owner collection, new
book, association) are never left half-written.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.exceptions import DuplicateError, NotFoundError, ValidationError
from app.models.book import Book
from app.models.booklist import BookList, BookListVisibility, utcnow
from app.models.user import User
from app.schemas.booklist import BookListCreate, BookListUpdate
from app.services.catalog import find_or_create_book, get_book
from app.services.users import get_user

logger = logging.getLogger(__name__)

BOOKLIST_NOT_FOUND = "Book list not found"


def _expanded(stmt):
    """Eager-load everything a BookListResponse renders."""
    return stmt.options(
        selectinload(BookList.user),
        selectinload(BookList.books),
        selectinload(BookList.reviews),
    )


def touch(booklist: BookList) -> None:
    booklist.last_edited = utcnow()


def get_booklist(db: Session, booklist_id: int) -> BookList:
    """Get a booklist by ID with owner, books and reviews loaded."""
    stmt = _expanded(select(BookList).where(BookList.id == booklist_id))
    booklist = db.execute(stmt).scalar_one_or_none()
    if booklist is None:
        raise NotFoundError(BOOKLIST_NOT_FOUND)
    return booklist


def list_public_booklists(db: Session, limit: int | None = None) -> list[BookList]:
    """
    Public booklists, most recently edited first.

    Args:
        limit: Maximum number of lists to return (None for all)
    """
    stmt = _expanded(
        select(BookList)
        .where(BookList.visibility == BookListVisibility.PUBLIC.value)
        .order_by(BookList.last_edited.desc(), BookList.id.desc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def list_booklists_by_owner(db: Session, owner_id: int) -> list[BookList]:
    """All of a user's booklists, public and private, most recent first."""
    stmt = _expanded(
        select(BookList)
        .where(BookList.user_id == owner_id)
        .order_by(BookList.last_edited.desc(), BookList.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def create_booklist(db: Session, data: BookListCreate) -> BookList:
    """
    Create a booklist and attach it to its owner.

    Raises:
        NotFoundError: the owner does not exist
    """
    owner: User = get_user(db, data.user)

    booklist = BookList(
        name=data.name,
        description=data.description,
        visibility=data.visibility.value,
        last_edited=utcnow(),
    )
    owner.book_lists.append(booklist)
    db.commit()
    db.refresh(booklist)

    logger.info(f"Booklist created: {booklist.id} '{booklist.name}' for user {owner.id}")
    return booklist


def add_book_to_booklist(db: Session, booklist_id: int, book_payload: dict[str, Any]) -> BookList:
    """
    Append a catalog book to a booklist, storing the book if it is new.

    Raises:
        NotFoundError: the booklist does not exist
        ValidationError: the payload is needed and invalid
        DuplicateError: the book is already in the list
    """
    booklist = get_booklist(db, booklist_id)
    book = find_or_create_book(db, book_payload)

    if book in booklist.books:
        raise DuplicateError("Book is already in the list")

    booklist.books.append(book)
    touch(booklist)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request added the same book to this list
        db.rollback()
        raise DuplicateError("Book is already in the list") from None

    logger.info(f"Book {book.id} added to booklist {booklist.id}")
    return booklist


def remove_book_from_booklist(db: Session, booklist_id: int, book_id: int) -> BookList:
    """
    Remove a book from a booklist. The book itself stays in the catalog.

    Raises:
        NotFoundError: the book or the booklist does not exist
        ValidationError: the book is not in the list
    """
    book: Book = get_book(db, book_id)
    booklist = get_booklist(db, booklist_id)

    if book not in booklist.books:
        raise ValidationError("Book is not in the list")

    booklist.books.remove(book)
    touch(booklist)
    db.commit()

    logger.info(f"Book {book.id} removed from booklist {booklist.id}")
    return booklist


def update_booklist(db: Session, booklist_id: int, data: BookListUpdate) -> BookList:
    """Apply the fields that were sent; the others keep their values."""
    booklist = get_booklist(db, booklist_id)

    changes = data.model_dump(exclude_none=True)
    if "visibility" in changes:
        changes["visibility"] = BookListVisibility(changes["visibility"]).value

    for field, value in changes.items():
        setattr(booklist, field, value)
    touch(booklist)
    db.commit()
    db.refresh(booklist)

    logger.info(f"Booklist {booklist.id} updated: {sorted(changes)}")
    return booklist


def delete_booklist(db: Session, booklist: BookList) -> None:
    """
    Delete a booklist together with its reviews and book associations.

    The booklist leaves its owner's collection in the same transaction.
    Books stay in the catalog.
    """
    booklist_id = booklist.id
    owner = booklist.user
    if owner is not None and booklist in owner.book_lists:
        owner.book_lists.remove(booklist)
    db.delete(booklist)
    db.commit()

    logger.info(f"Booklist {booklist_id} deleted")


def list_all_booklists(db: Session) -> list[BookList]:
    """Every booklist regardless of visibility, oldest first."""
    stmt = _expanded(select(BookList).order_by(BookList.id))
    return list(db.execute(stmt).scalars().all())
