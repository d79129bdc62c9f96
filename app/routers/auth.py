"""
Authentication Router

Public endpoints (no token required):
- Registration (email/password)
- Login (email/password → JWT)
- Password update and user lookup by email
- Read-only views of public booklists, books and reviews

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Register and login have a stricter rate limit (RATE_LIMIT_AUTH)
"""

import logging

from fastapi import APIRouter, Request

from app.config import get_settings
from app.dependencies import DbSession, RecordIdPath
from app.schemas.book import BookResponse
from app.schemas.booklist import BookListResponse
from app.schemas.review import ReviewPublicResponse
from app.schemas.user import (
    LoginRequest,
    LoginResponse,
    PasswordUpdate,
    RegisterResponse,
    UserCreate,
    UserResponse,
    UserSearchResponse,
    UserUpdateResponse,
)
from app.services import booklists as booklist_service
from app.services import catalog as catalog_service
from app.services import reviews as review_service
from app.services import users as user_service
from app.services.rate_limiter import limiter

logger = logging.getLogger(__name__)
settings = get_settings()

# Number of booklists on the public landing page
LANDING_PAGE_BOOKLISTS = 10

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        400: {"description": "Bad request"},
        401: {"description": "Unauthorized"},
        404: {"description": "Not found"},
    },
)


# -------------------------------------------------------------------------
# Registration & Login
# -------------------------------------------------------------------------
@router.post(
    "/register",
    response_model=RegisterResponse,
    summary="Register a new user",
    description="""
    Create a new user account with email and password.

    **Requirements:**
    - name: 3-30 characters
    - email: valid address, not already registered
    - password: 6-30 characters
    - isActive: whether the account starts out verified
    """,
)
@limiter.limit(settings.rate_limit_auth)
def register(
    request: Request,
    user_data: UserCreate,
    db: DbSession,
) -> RegisterResponse:
    user = user_service.register_user(db, user_data)
    return RegisterResponse(
        msg="User registered successfully",
        saved_user=UserResponse.model_validate(user),
    )


@router.post(
    "/localLogin",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="""
    Authenticate with email and password to receive a JWT.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
@limiter.limit(settings.rate_limit_auth)
def local_login(
    request: Request,
    credentials: LoginRequest,
    db: DbSession,
) -> LoginResponse:
    token, user = user_service.authenticate_user(db, credentials.email, credentials.password)
    return LoginResponse(
        token=token,
        user=UserResponse.model_validate(user),
    )


# -------------------------------------------------------------------------
# User Management
# -------------------------------------------------------------------------
@router.put(
    "/users/{user_id}",
    response_model=UserUpdateResponse,
    summary="Change a user's password",
)
def update_password(
    user_id: RecordIdPath,
    data: PasswordUpdate,
    db: DbSession,
) -> UserUpdateResponse:
    user = user_service.update_password(db, user_id, data.password)
    return UserUpdateResponse(user=UserResponse.model_validate(user))


@router.get(
    "/users/{email}",
    response_model=UserSearchResponse,
    summary="Find users by email",
    description="Returns the matching user with summaries of their booklists.",
)
def find_users_by_email(email: str, db: DbSession) -> UserSearchResponse:
    users = user_service.find_users_by_email(db, email)
    return UserSearchResponse(
        users=[UserResponse.model_validate(user) for user in users],
    )


# -------------------------------------------------------------------------
# Public Read-Only Views
# -------------------------------------------------------------------------
@router.get(
    "/booklist10",
    response_model=list[BookListResponse],
    summary="Latest public booklists",
    description="Up to 10 public booklists, most recently edited first.",
)
def latest_public_booklists(db: DbSession) -> list[BookListResponse]:
    booklists = booklist_service.list_public_booklists(db, limit=LANDING_PAGE_BOOKLISTS)
    return [BookListResponse.model_validate(bl) for bl in booklists]


@router.get(
    "/public/books/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_public_book(book_id: RecordIdPath, db: DbSession) -> BookResponse:
    book = catalog_service.get_book(db, book_id)
    return BookResponse.model_validate(book)


@router.get(
    "/public/review/{booklist_id}",
    response_model=list[ReviewPublicResponse],
    summary="Public reviews of a booklist",
    description="Newest first, each with the reviewer's id, name and email.",
)
def list_public_reviews(booklist_id: RecordIdPath, db: DbSession) -> list[ReviewPublicResponse]:
    reviews = review_service.list_public_reviews(db, booklist_id)
    return [ReviewPublicResponse.model_validate(review) for review in reviews]


@router.get(
    "/public/bookList/{booklist_id}",
    response_model=BookListResponse,
    summary="Get a booklist by ID",
)
def get_public_booklist(booklist_id: RecordIdPath, db: DbSession) -> BookListResponse:
    booklist = booklist_service.get_booklist(db, booklist_id)
    return BookListResponse.model_validate(booklist)
