"""
Booklist API Application Package

Users curate ordered lists of books, share them publicly or keep them
private, and review each other's lists.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions (auth, admin access)
- exceptions.py: Domain errors mapped to HTTP responses
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (users, catalog, booklists, reviews, email)
"""

__version__ = "1.0.0"
