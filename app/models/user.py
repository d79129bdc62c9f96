"""
User Model

Represents a registered reader. Users own booklists and write reviews.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
"""

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.booklist import BookList


class UserRole(str, Enum):
    """
    Roles a user can hold.

    - REGULAR_USER: Default for every registration
    - MANAGER: Elevated reader (reserved for moderation features)
    - ADMIN: Full access to the admin panel
    """
    REGULAR_USER = "regular_user"
    MANAGER = "manager"
    ADMIN = "admin"


def is_manager(role: str) -> bool:
    return role == UserRole.MANAGER.value


def is_admin(role: str) -> bool:
    return role == UserRole.ADMIN.value


class User(Base):
    """
    User model representing registered readers.

    Table: users

    hashed_password is nullable because federated (social) accounts
    authenticate elsewhere and never set a local password.

    Relationships:
    - book_lists: One-to-Many with BookList, in creation order. The
      collection is derived from booklists.user_id, so it can never point
      at a deleted booklist.

    Example:
        user = User(
            name="Alice",
            email="a@x.com",
            hashed_password=hash_password("secret1"),
            is_active=True,
        )
    """

    __tablename__ = "users"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address (used for login)"
    )

    hashed_password: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Bcrypt hashed password (null for federated accounts)"
    )

    # -------------------------------------------------------------------------
    # Account Status
    # -------------------------------------------------------------------------
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Set once the email address has been verified"
    )

    role: Mapped[str] = mapped_column(
        String(20),
        default=UserRole.REGULAR_USER.value,
        nullable=False,
        comment="regular_user, manager or admin"
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the user registered"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    book_lists: Mapped[list["BookList"]] = relationship(
        "BookList",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="BookList.id",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, email='{self.email}', role='{self.role}')"
