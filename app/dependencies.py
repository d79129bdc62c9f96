"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Provided here:
- DbSession: per-request database session
- RecordIdPath: a path id bounded to the database integer range
- get_current_user: the user behind a valid "Authorization: Bearer" token
- get_admin_reader / AdminWriter: access to the admin panel, granted by
  the admin API key header or by the user's role
"""

import logging
import secrets
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, HTTPException, Path, status
from fastapi.security import APIKeyHeader, OAuth2PasswordBearer
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.schemas.common import MAX_RECORD_ID

if TYPE_CHECKING:
    from app.models.user import User

logger = logging.getLogger(__name__)
settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]

# Ids outside the BIGINT range cannot match a row; reject them as bad input
RecordIdPath = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


# =============================================================================
# JWT Authentication (User Authentication)
# =============================================================================
# OAuth2PasswordBearer extracts the token from "Authorization: Bearer <token>"
# and adds the "Authorize" button to Swagger UI.

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/auth/localLogin",
    auto_error=True,  # 401 if the header is missing
)

oauth2_scheme_optional = OAuth2PasswordBearer(
    tokenUrl="/api/auth/localLogin",
    auto_error=False,
)

admin_key_scheme = APIKeyHeader(
    name=settings.api_key_header,
    auto_error=False,
    description="Admin panel API key",
)


def _user_from_token(db: Session, token: str) -> "User | None":
    from app.models.user import User
    from app.services.security import ACCESS_TOKEN_TYPE, verify_token_type

    payload = verify_token_type(token, ACCESS_TOKEN_TYPE)
    if payload is None:
        return None

    user_id = payload.get("sub")
    if user_id is None:
        return None

    try:
        stmt = select(User).where(User.id == int(user_id))
    except (TypeError, ValueError):
        return None
    return db.execute(stmt).scalar_one_or_none()


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
):
    """
    Extract and validate the current user from a JWT token.

    1. Extracts the Bearer token from the Authorization header
    2. Verifies signature, expiry and token type
    3. Loads the referenced user

    Raises:
        HTTPException: 401 if the token is invalid or the user is gone
    """
    user = _user_from_token(db, token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# =============================================================================
# Admin Panel Authentication
# =============================================================================
def _has_admin_key(api_key: str | None) -> bool:
    if not settings.admin_api_key or not api_key:
        return False
    return secrets.compare_digest(api_key, settings.admin_api_key)


def _admin_access(
    api_key: str | None,
    token: str | None,
    db: Session,
    allow_manager: bool,
) -> str:
    """
    Resolve who is using the admin panel.

    Returns:
        "api-key" or the user's email, for audit logging

    Raises:
        HTTPException: 401 without credentials, 403 with a non-admin role
    """
    from app.models.user import is_admin, is_manager

    if _has_admin_key(api_key):
        return "api-key"

    user = _user_from_token(db, token) if token else None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Admin credentials required. Provide {settings.api_key_header} or a bearer token.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if is_admin(user.role) or (allow_manager and is_manager(user.role)):
        return user.email

    logger.warning(f"Admin panel access denied for user {user.id} ({user.role})")
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Admin privileges required",
    )


def get_admin_reader(
    api_key: str | None = Depends(admin_key_scheme),
    token: str | None = Depends(oauth2_scheme_optional),
    db: Session = Depends(get_db),
) -> str:
    """Read access to the admin panel: admins and managers."""
    return _admin_access(api_key, token, db, allow_manager=True)


def get_admin_writer(
    api_key: str | None = Depends(admin_key_scheme),
    token: str | None = Depends(oauth2_scheme_optional),
    db: Session = Depends(get_db),
) -> str:
    """Write access to the admin panel: admins only."""
    return _admin_access(api_key, token, db, allow_manager=False)


AdminWriter = Annotated[str, Depends(get_admin_writer)]
