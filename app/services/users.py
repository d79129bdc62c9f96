"""
User Service

Credential store operations: registration, login, password changes and
email verification.

Password hashing is an explicit step of this service. It runs only when
a new plaintext password is supplied (registration, password update),
so saving a user for any other reason never re-hashes an existing hash.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import AuthenticationError, DuplicateError, NotFoundError, ValidationError
from app.models.user import User, UserRole
from app.schemas.user import UserCreate
from app.services.security import (
    EMAIL_VERIFICATION_TOKEN_TYPE,
    create_access_token,
    create_email_verification_token,
    hash_password,
    verify_password,
    verify_token_type,
)

logger = logging.getLogger(__name__)

INVALID_VERIFICATION_TOKEN = "Invalid or expired verification token."


def set_password(user: User, plain_password: str) -> None:
    """Replace the user's password hash. The plaintext is not kept."""
    user.hashed_password = hash_password(plain_password)


def get_user(db: Session, user_id: int) -> User:
    """Get a user by ID, or raise NotFoundError."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found.")
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == email)
    return db.execute(stmt).scalar_one_or_none()


def register_user(db: Session, data: UserCreate) -> User:
    """
    Create a new user with a hashed password.

    Raises:
        DuplicateError: if the email is already registered
    """
    if get_user_by_email(db, data.email) is not None:
        raise DuplicateError("Email already exists")

    user = User(
        name=data.name,
        email=data.email,
        is_active=data.is_active,
    )
    set_password(user, data.password)

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise DuplicateError("Email already exists") from None
    db.refresh(user)

    logger.info(f"New user registered: {user.email}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> tuple[str, User]:
    """
    Check an email/password pair and issue an access token.

    Returns:
        Tuple of (token, user)

    Raises:
        AuthenticationError: unknown email, account without a local
            password, or wrong password
    """
    user = get_user_by_email(db, email)
    if user is None:
        logger.warning(f"Login failed: user not found for {email}")
        raise AuthenticationError("User not found.")

    if not user.hashed_password or not verify_password(password, user.hashed_password):
        logger.warning(f"Login failed: incorrect password for {email}")
        raise AuthenticationError("Wrong password")

    token = create_access_token({"sub": str(user.id), "email": user.email})
    logger.info(f"User logged in: {user.email}")
    return token, user


def find_users_by_email(db: Session, email: str) -> list[User]:
    """Return every user registered with this email (at most one)."""
    stmt = select(User).where(User.email == email).order_by(User.id)
    users = list(db.execute(stmt).scalars().all())
    if not users:
        raise NotFoundError("Users not found.")
    return users


def update_password(db: Session, user_id: int, new_password: str) -> User:
    """Hash and store a new password for the user."""
    user = get_user(db, user_id)
    set_password(user, new_password)
    db.commit()
    db.refresh(user)

    logger.info(f"Password updated for user {user.id}")
    return user


def issue_verification_token(user: User) -> str:
    return create_email_verification_token(user.id)


def verify_email(db: Session, token: str) -> User:
    """
    Activate the account referenced by a verification token.

    Tokens are single-use: once the account is active the same token is
    rejected.

    Raises:
        ValidationError: bad signature, expired token, unknown user or
            already-verified account
    """
    payload = verify_token_type(token, EMAIL_VERIFICATION_TOKEN_TYPE)
    if payload is None or payload.get("sub") is None:
        raise ValidationError(INVALID_VERIFICATION_TOKEN)

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise ValidationError(INVALID_VERIFICATION_TOKEN) from None

    user = db.get(User, user_id)
    if user is None or user.is_active:
        raise ValidationError(INVALID_VERIFICATION_TOKEN)

    user.is_active = True
    db.commit()
    db.refresh(user)

    logger.info(f"Email verified for user {user.email}")
    return user


def list_users(db: Session) -> list[User]:
    stmt = select(User).order_by(User.id)
    return list(db.execute(stmt).scalars().all())


def set_role(db: Session, user_id: int, role: UserRole) -> User:
    """Change a user's role (regular_user, manager or admin)."""
    user = get_user(db, user_id)
    previous = user.role
    user.role = role.value
    db.commit()
    db.refresh(user)

    logger.info(f"User {user.id} role changed: {previous} -> {user.role}")
    return user
