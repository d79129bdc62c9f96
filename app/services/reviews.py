"""
Review Service

Reviews are appended to their booklist when created and are never
deleted; hiding one removes it from every reader-facing listing.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.exceptions import NotFoundError
from app.models.review import Review, ReviewVisibility
from app.schemas.review import ReviewCreate
from app.services.booklists import get_booklist, touch
from app.services.users import get_user

logger = logging.getLogger(__name__)


def get_review(db: Session, review_id: int) -> Review:
    review = db.get(Review, review_id)
    if review is None:
        raise NotFoundError("Review not found")
    return review


def create_review(db: Session, data: ReviewCreate) -> Review:
    """
    Create a review and append it to the booklist's reviews.

    The review and the booklist change commit together.

    Raises:
        NotFoundError: the booklist or the reviewer does not exist
    """
    booklist = get_booklist(db, data.booklist)
    reviewer = get_user(db, data.user)

    review = Review(review=data.review, user=reviewer)
    booklist.reviews.append(review)
    touch(booklist)
    db.commit()
    db.refresh(review)

    logger.info(f"Review {review.id} added to booklist {booklist.id} by user {reviewer.id}")
    return review


def hide_review(db: Session, review_id: int) -> Review:
    """Set a review's visibility to hidden. Hiding twice is harmless."""
    review = get_review(db, review_id)
    review.visibility = ReviewVisibility.HIDDEN.value
    db.commit()
    db.refresh(review)

    logger.info(f"Review {review.id} hidden")
    return review


def list_public_reviews(db: Session, booklist_id: int) -> list[Review]:
    """
    Public reviews of a booklist, newest first, with reviewers loaded.

    Raises:
        NotFoundError: the booklist does not exist
    """
    get_booklist(db, booklist_id)

    stmt = (
        select(Review)
        .options(selectinload(Review.user))
        .where(
            Review.booklist_id == booklist_id,
            Review.visibility == ReviewVisibility.PUBLIC.value,
        )
        .order_by(Review.date.desc(), Review.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def list_reviews(db: Session) -> list[Review]:
    """Every review, hidden ones included, oldest first."""
    stmt = select(Review).order_by(Review.id)
    return list(db.execute(stmt).scalars().all())
