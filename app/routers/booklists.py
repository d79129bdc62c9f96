"""
BookLists Router

Booklist CRUD. Every endpoint requires a bearer token.

Responses expand the owner (id, name, email), the books (all fields)
and review summaries (id, visibility, date).

Route order matters: /all is declared before /{user_id} so that it is
not captured by the path parameter.
"""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import DbSession, RecordIdPath, get_current_user
from app.schemas.booklist import BookListCreate, BookListResponse, BookListUpdate
from app.services import booklists as booklist_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/book-list",
    tags=["Booklists"],
    dependencies=[Depends(get_current_user)],
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Booklist or owner not found"},
    },
)


@router.get(
    "/all",
    response_model=list[BookListResponse],
    summary="List all public booklists",
    description="Every public booklist, most recently edited first.",
)
def list_public_booklists(db: DbSession) -> list[BookListResponse]:
    booklists = booklist_service.list_public_booklists(db)
    return [BookListResponse.model_validate(bl) for bl in booklists]


@router.post(
    "/new",
    response_model=BookListResponse,
    summary="Create a booklist",
)
def create_booklist(data: BookListCreate, db: DbSession) -> BookListResponse:
    booklist = booklist_service.create_booklist(db, data)
    return BookListResponse.model_validate(booklist)


@router.get(
    "/{user_id}",
    response_model=list[BookListResponse],
    summary="List a user's booklists",
    description="Public and private lists of the user, most recently edited first.",
)
def list_user_booklists(user_id: RecordIdPath, db: DbSession) -> list[BookListResponse]:
    booklists = booklist_service.list_booklists_by_owner(db, user_id)
    return [BookListResponse.model_validate(bl) for bl in booklists]


@router.delete(
    "/{booklist_id}",
    response_model=BookListResponse,
    summary="Delete a booklist",
    description="""
    Delete a booklist with its reviews and book associations.
    The books stay in the catalog. Returns the deleted booklist.
    """,
)
def delete_booklist(booklist_id: RecordIdPath, db: DbSession) -> BookListResponse:
    booklist = booklist_service.get_booklist(db, booklist_id)
    # Render before deleting; the row is gone after the commit
    deleted = BookListResponse.model_validate(booklist)
    booklist_service.delete_booklist(db, booklist)
    return deleted


@router.patch(
    "/{booklist_id}",
    response_model=BookListResponse,
    summary="Update a booklist",
    description="Only the fields sent (name, description, visibility) are changed.",
)
def update_booklist(
    booklist_id: RecordIdPath,
    data: BookListUpdate,
    db: DbSession,
) -> BookListResponse:
    booklist = booklist_service.update_booklist(db, booklist_id, data)
    return BookListResponse.model_validate(booklist)
