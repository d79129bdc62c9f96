"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- auth.py: /api/auth/* (public: registration, login, public views)
- email.py: /api/email/* (public: outbound mail, verification)
- books.py: /api/book/* (bearer token)
- booklists.py: /api/book-list/* (bearer token)
- reviews.py: /api/review/* (bearer token)
- admin.py: /admin/* (admin API key or admin role)

Each router is imported and registered in main.py.
"""

from app.routers.admin import router as admin_router
from app.routers.auth import router as auth_router
from app.routers.booklists import router as booklists_router
from app.routers.books import router as books_router
from app.routers.email import router as email_router
from app.routers.reviews import router as reviews_router

__all__ = [
    "admin_router",
    "auth_router",
    "booklists_router",
    "books_router",
    "email_router",
    "reviews_router",
]
