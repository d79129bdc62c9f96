"""
Books Router

Catalog access and booklist membership. Every endpoint requires a
bearer token.

Books are never created directly: posting a book to a list stores it
the first time its selfLink is seen and reuses it afterwards.
"""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import DbSession, get_current_user
from app.schemas.book import AddBookRequest, BookResponse, RemoveBookRequest
from app.schemas.common import MessageResponse
from app.services import booklists as booklist_service
from app.services import catalog as catalog_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/book",
    tags=["Books"],
    dependencies=[Depends(get_current_user)],
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Book or booklist not found"},
    },
)


@router.get(
    "/all",
    response_model=list[BookResponse],
    summary="List all books",
)
def list_books(db: DbSession) -> list[BookResponse]:
    books = catalog_service.list_books(db)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "/post-book-to-list",
    response_model=MessageResponse,
    summary="Add a book to a booklist",
    description="""
    Add a catalog book to a booklist.

    If no stored book has the payload's **selfLink**, the payload is
    validated and stored first. A book can appear only once per list.
    """,
    responses={400: {"description": "Invalid book or book already in the list"}},
)
def add_book_to_list(data: AddBookRequest, db: DbSession) -> MessageResponse:
    booklist_service.add_book_to_booklist(db, data.book_list_id, data.book_body)
    return MessageResponse(message="Book added to the list successfully")


@router.delete(
    "/delete-book-from-list",
    response_model=MessageResponse,
    summary="Remove a book from a booklist",
    responses={400: {"description": "Book is not in the list"}},
)
def remove_book_from_list(data: RemoveBookRequest, db: DbSession) -> MessageResponse:
    booklist_service.remove_book_from_booklist(db, data.book_list_id, data.book_id)
    return MessageResponse(message="Book removed from the list successfully")
