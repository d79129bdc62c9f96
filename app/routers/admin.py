"""
Admin Panel Router

A JSON CRUD surface over the four stores, mounted at /admin.

Every resource gets the same read endpoints from one factory:
    GET /admin/{resource}           list everything
    GET /admin/{resource}/{id}      one record

Writes are limited to what the stores allow:
    DELETE /admin/books/{id}        remove from the catalog and all lists
    DELETE /admin/booklists/{id}    delete with reviews and associations
    DELETE /admin/reviews/{id}      hide (reviews are never deleted)
    PATCH  /admin/users/{id}/role   change a user's role

Authentication is separate from the user API: the admin API key header,
or a bearer token of a user with the admin role. Managers get read-only
access.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.dependencies import (
    AdminWriter,
    DbSession,
    RecordIdPath,
    get_admin_reader,
    get_admin_writer,
)
from app.schemas.book import BookResponse
from app.schemas.booklist import BookListResponse
from app.schemas.review import ReviewResponse
from app.schemas.user import RoleUpdate, UserResponse
from app.services import booklists as booklist_service
from app.services import catalog as catalog_service
from app.services import reviews as review_service
from app.services import users as user_service

logger = logging.getLogger(__name__)


def create_resource_router(
    resource: str,
    response_model: type[BaseModel],
    list_items: Callable[[Session], list[Any]],
    get_item: Callable[[Session, int], Any],
    delete_item: Callable[[Session, Any], Any] | None = None,
) -> APIRouter:
    """
    Build the admin endpoints for one store.

    Args:
        resource: URL segment and tag, e.g. "books"
        response_model: Schema every record is rendered with
        list_items: Returns all records
        get_item: Returns one record or raises NotFoundError
        delete_item: Removes (or hides) a record; returns the record if
            it still exists afterwards, None if it was deleted. Omit to
            make the resource read-only.
    """
    router = APIRouter(prefix=f"/{resource}", tags=[f"Admin: {resource}"])

    @router.get(
        "",
        response_model=list[response_model],
        dependencies=[Depends(get_admin_reader)],
        summary=f"List {resource}",
    )
    def list_resource(db: DbSession):
        return [response_model.model_validate(item) for item in list_items(db)]

    @router.get(
        "/{item_id}",
        response_model=response_model,
        dependencies=[Depends(get_admin_reader)],
        summary=f"Get one of {resource}",
    )
    def get_resource(item_id: RecordIdPath, db: DbSession):
        return response_model.model_validate(get_item(db, item_id))

    if delete_item is not None:

        @router.delete(
            "/{item_id}",
            response_model=response_model,
            summary=f"Delete one of {resource}",
        )
        def delete_resource(item_id: RecordIdPath, db: DbSession, admin: AdminWriter):
            item = get_item(db, item_id)
            # Render first; a deleted row cannot be read after the commit
            snapshot = response_model.model_validate(item)
            remaining = delete_item(db, item)
            logger.info(f"Admin {admin} deleted {resource} {item_id}")
            if remaining is None:
                return snapshot
            return response_model.model_validate(remaining)

    return router


def _hide_review(db: Session, review) -> Any:
    return review_service.hide_review(db, review.id)


users_router = create_resource_router(
    "users",
    UserResponse,
    list_items=user_service.list_users,
    get_item=user_service.get_user,
)


@users_router.patch(
    "/{item_id}/role",
    response_model=UserResponse,
    dependencies=[Depends(get_admin_writer)],
    summary="Change a user's role",
)
def update_user_role(item_id: RecordIdPath, data: RoleUpdate, db: DbSession) -> UserResponse:
    user = user_service.set_role(db, item_id, data.role)
    return UserResponse.model_validate(user)


books_router = create_resource_router(
    "books",
    BookResponse,
    list_items=catalog_service.list_books,
    get_item=catalog_service.get_book,
    delete_item=catalog_service.delete_book,
)

booklists_router = create_resource_router(
    "booklists",
    BookListResponse,
    list_items=booklist_service.list_all_booklists,
    get_item=booklist_service.get_booklist,
    delete_item=booklist_service.delete_booklist,
)

reviews_router = create_resource_router(
    "reviews",
    ReviewResponse,
    list_items=review_service.list_reviews,
    get_item=review_service.get_review,
    delete_item=_hide_review,
)

router = APIRouter(
    prefix="/admin",
    responses={
        401: {"description": "Missing admin credentials"},
        403: {"description": "Admin privileges required"},
        404: {"description": "Record not found"},
    },
)
router.include_router(users_router)
router.include_router(books_router)
router.include_router(booklists_router)
router.include_router(reviews_router)
