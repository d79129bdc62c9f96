"""
Reviews Router

Writing and hiding booklist reviews. Every endpoint requires a bearer
token. Reviews are never deleted; "update" hides them.

Public reviews are read through /api/auth/public/review/{booklist_id}.
"""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import DbSession, get_current_user
from app.schemas.review import ReviewCreate, ReviewHideRequest, ReviewResponse
from app.services import reviews as review_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/review",
    tags=["Reviews"],
    dependencies=[Depends(get_current_user)],
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Review, booklist or reviewer not found"},
    },
)


@router.post(
    "/new",
    response_model=ReviewResponse,
    summary="Review a booklist",
    description="""
    Create a review and append it to the booklist's reviews.

    **Requirements:**
    - review: 3-5000 characters
    - user and booklist must exist
    """,
)
def create_review(data: ReviewCreate, db: DbSession) -> ReviewResponse:
    review = review_service.create_review(db, data)
    return ReviewResponse.model_validate(review)


@router.put(
    "/update",
    response_model=ReviewResponse,
    summary="Hide a review",
    description="Sets the review's visibility to hidden.",
)
def hide_review(data: ReviewHideRequest, db: DbSession) -> ReviewResponse:
    review = review_service.hide_review(db, data.review_id)
    return ReviewResponse.model_validate(review)
