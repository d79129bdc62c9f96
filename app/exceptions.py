"""
Domain Exceptions

Services raise these instead of HTTPException so that business logic
stays independent of the HTTP layer. Each exception carries the status
code it maps to; app.main registers a single handler that turns any
AppError into a JSON response of the form {"detail": message}.

Taxonomy:
- ValidationError (400): malformed or missing input
- NotFoundError (404): referenced entity absent
- DuplicateError (400): unique-field conflict (email, book already in list)
- AuthenticationError (401): missing/invalid token, wrong credentials
- PermissionDeniedError (403): authenticated but not allowed
- InternalError (500): unexpected datastore or transport failure
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def format_validation_error(errors) -> str:
    """
    Render the first violation of a pydantic error list as "field: message".

    Works for both pydantic.ValidationError.errors() and
    RequestValidationError.errors(); the request location prefix
    ("body", "query", ...) is dropped.
    """
    if not errors:
        return "Invalid request."

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    if loc and loc[0] in _REQUEST_LOCATIONS:
        loc = loc[1:]

    message = first.get("msg", "Invalid value")
    if not loc:
        return message
    return f"{'.'.join(loc)}: {message}"
