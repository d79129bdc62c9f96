"""
User Pydantic Schemas

These schemas define the shape of data for user and authentication
operations.

Schemas:
- UserCreate: Registration data (name, email, password, isActive)
- LoginRequest: Email/password login
- PasswordUpdate: New password for an existing user
- UserSummary: Minimal user info embedded in booklists and reviews
- UserResponse: Full user data (never exposes the password hash)
- RegisterResponse / LoginResponse / UserUpdateResponse / UserSearchResponse:
  response envelopes of the auth endpoints

Field names are snake_case in Python and keep the camelCase wire names
the frontend already uses (isActive, bookLists, savedUser).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.user import UserRole

# Shared password rule for registration, login and password updates
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 30


class UserCreate(BaseModel):
    """
    Schema for user registration.

    Example request body:
    {
        "name": "Alice",
        "email": "a@x.com",
        "password": "secret1",
        "isActive": true
    }
    """

    name: str = Field(
        ...,
        min_length=3,
        max_length=30,
        description="Display name",
        examples=["Alice"],
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["a@x.com"],
    )

    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password (6-30 characters)",
        examples=["secret1"],
    )

    is_active: bool = Field(
        ...,
        alias="isActive",
        description="Whether the account starts out verified",
    )

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Account password",
    )


class PasswordUpdate(BaseModel):
    """Schema for replacing a user's password."""

    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="New password",
    )


class RoleUpdate(BaseModel):
    """Schema for changing a user's role (admin panel)."""

    role: UserRole = Field(..., description="regular_user, manager or admin")


class BookListSummary(BaseModel):
    """Booklist info embedded in user responses."""

    id: int = Field(..., description="Booklist ID")
    name: str = Field(..., description="Booklist name")
    description: str | None = Field(default=None, description="Short description")
    visibility: str = Field(..., description="public or private")
    last_edited: datetime = Field(..., description="When the list last changed")

    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """Owner/reviewer info embedded in booklist and review responses."""

    id: int = Field(..., description="Unique user identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """
    Schema for user responses.

    SECURITY: Never includes the password hash.
    """

    id: int = Field(..., description="Unique user identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    is_active: bool = Field(
        ...,
        alias="isActive",
        description="Whether the email address has been verified",
    )
    role: str = Field(..., description="regular_user, manager or admin")
    date: datetime = Field(..., description="When the user registered")
    book_lists: list[BookListSummary] = Field(
        default=[],
        alias="bookLists",
        description="Booklists owned by the user, in creation order",
    )

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice",
                "email": "a@x.com",
                "isActive": True,
                "role": "regular_user",
                "date": "2024-01-15T10:30:00Z",
                "bookLists": [],
            }
        },
    )


class RegisterResponse(BaseModel):
    msg: str
    saved_user: UserResponse = Field(..., alias="savedUser")

    model_config = ConfigDict(populate_by_name=True)


class LoginResponse(BaseModel):
    """
    Returned by a successful login.

    Send the token back on protected requests:
        Authorization: Bearer <token>
    """

    success: bool = True
    token: str = Field(..., description="Signed JWT")
    token_type: str = Field(default="bearer", description="Always 'bearer'")
    user: UserResponse


class UserUpdateResponse(BaseModel):
    success: bool = True
    user: UserResponse


class UserSearchResponse(BaseModel):
    success: bool = True
    users: list[UserResponse]
