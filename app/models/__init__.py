"""
SQLAlchemy Models Package

Model Relationships:
- User -> BookList: One-to-Many (a user owns many booklists)
- BookList <-> Book: Many-to-Many, ordered (booklist_books)
- BookList -> Review: One-to-Many (reviews written about a booklist)
- User -> Review: One-to-Many (reviews written by a user)

Import all models here so they are registered with Base.metadata
before Alembic or create_all() runs.
"""

from app.models.user import User, UserRole
from app.models.book import Book, booklist_books
from app.models.booklist import BookList, BookListVisibility
from app.models.review import Review, ReviewVisibility

__all__ = [
    "User",
    "UserRole",
    "Book",
    "booklist_books",
    "BookList",
    "BookListVisibility",
    "Review",
    "ReviewVisibility",
]
