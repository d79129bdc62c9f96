"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schemas are kept separate from the SQLAlchemy models so the API controls
exactly what is exposed (no password hashes) and keeps the frontend's
camelCase wire names independent of the database column names.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
- XxxSummary: Minimal data embedded in another resource's response
"""

from app.schemas.book import (
    AddBookRequest,
    BookCreate,
    BookResponse,
    RemoveBookRequest,
)
from app.schemas.booklist import (
    BookListCreate,
    BookListResponse,
    BookListUpdate,
)
from app.schemas.common import (
    EmailRequest,
    MessageResponse,
    VerificationEmailRequest,
)
from app.schemas.review import (
    ReviewCreate,
    ReviewHideRequest,
    ReviewPublicResponse,
    ReviewResponse,
    ReviewSummary,
)
from app.schemas.user import (
    BookListSummary,
    LoginRequest,
    LoginResponse,
    PasswordUpdate,
    RegisterResponse,
    RoleUpdate,
    UserCreate,
    UserResponse,
    UserSearchResponse,
    UserSummary,
    UserUpdateResponse,
)

__all__ = [
    # Book schemas
    "BookCreate",
    "BookResponse",
    "AddBookRequest",
    "RemoveBookRequest",
    # BookList schemas
    "BookListCreate",
    "BookListUpdate",
    "BookListResponse",
    "BookListSummary",
    # Review schemas
    "ReviewCreate",
    "ReviewHideRequest",
    "ReviewResponse",
    "ReviewPublicResponse",
    "ReviewSummary",
    # User / auth schemas
    "UserCreate",
    "LoginRequest",
    "PasswordUpdate",
    "RoleUpdate",
    "UserSummary",
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "UserUpdateResponse",
    "UserSearchResponse",
    # Shared
    "MessageResponse",
    "EmailRequest",
    "VerificationEmailRequest",
]
