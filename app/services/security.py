"""
Security Service

Handles password hashing and JWT token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib), per-password random salt and
   a fixed cost factor (BCRYPT_ROUNDS)
2. Signed, expiring JWT access tokens for authenticated requests
3. Signed, expiring JWT email verification tokens

Usage:
    from app.services.security import hash_password, verify_password

    hashed = hash_password("secret1")
    is_valid = verify_password("secret1", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# The cost factor is fixed when the context is created; every hash made
# by this process uses it.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("secret1")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------

ALGORITHM = "HS256"
ACCESS_TOKEN_TYPE = "access"
EMAIL_VERIFICATION_TOKEN_TYPE = "email_verification"


def _create_token(data: dict, token_type: str, expires_delta: timedelta) -> str:
    to_encode = data.copy()
    now = datetime.now(UTC)
    to_encode.update({"iat": now, "exp": now + expires_delta, "type": token_type})

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=ALGORITHM,
    )


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode in the token ("sub" is the user id)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token({"sub": "1", "email": "a@x.com"})
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    return _create_token(data, ACCESS_TOKEN_TYPE, expires_delta)


def create_email_verification_token(
    user_id: int,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a token that proves control of a user's mailbox.

    The token is embedded in the link sent by email. It is signed with
    the server secret, so it cannot be forged from a known user id, and
    it expires after EMAIL_VERIFICATION_EXPIRE_HOURS.
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.email_verification_expire_hours)
    return _create_token(
        {"sub": str(user_id)},
        EMAIL_VERIFICATION_TOKEN_TYPE,
        expires_delta,
    )


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
        )
        return payload
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None


def verify_token_type(token: str, expected_type: str) -> dict | None:
    """
    Decode a token and verify its type.

    Keeps a verification token from being replayed as a login token
    and vice versa.

    Returns:
        Decoded payload if valid and correct type, None otherwise
    """
    payload = decode_token(token)

    if payload is None:
        return None

    if payload.get("type") != expected_type:
        logger.warning(f"Token type mismatch: expected {expected_type}")
        return None

    return payload
