"""
pytest Fixtures for Booklist API Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)

Every test runs inside a transaction that is rolled back afterwards, so
the in-memory database starts empty for each test.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# Settings are read once and cached at import time.
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_API_KEY"] = "test-admin-api-key-12345"
os.environ["RESEND_API_KEY"] = ""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Book, BookList, Review, User
from app.services.security import create_access_token, hash_password

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the test session.

    get_db is overridden so every request uses db_session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# AUTH HELPERS
# =============================================================================
def make_auth_header(user: User) -> dict:
    """Authorization header carrying a fresh access token for the user."""
    token = create_access_token({"sub": str(user.id), "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(sample_user: User) -> dict:
    return make_auth_header(sample_user)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
def _create_user(db_session: Session, **fields) -> User:
    user = User(**fields)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """An active regular user with password "secret1"."""
    return _create_user(
        db_session,
        name="Alice",
        email="a@x.com",
        hashed_password=hash_password("secret1"),
        is_active=True,
    )


@pytest.fixture
def second_user(db_session: Session) -> User:
    """A second, not yet verified user."""
    return _create_user(
        db_session,
        name="Bob",
        email="b@x.com",
        hashed_password=hash_password("secret2"),
        is_active=False,
    )


@pytest.fixture
def admin_user(db_session: Session) -> User:
    return _create_user(
        db_session,
        name="Admin",
        email="admin@x.com",
        hashed_password=hash_password("adminpass"),
        is_active=True,
        role="admin",
    )


@pytest.fixture
def manager_user(db_session: Session) -> User:
    return _create_user(
        db_session,
        name="Manager",
        email="manager@x.com",
        hashed_password=hash_password("managerpass"),
        is_active=True,
        role="manager",
    )


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """A stored catalog book, not yet in any booklist."""
    book = Book(
        title="Dune",
        authors="Frank Herbert",
        description="Desert planet politics",
        page_count="412",
        sale_price={"amount": 9.99, "currencyCode": "USD"},
        self_link="isbn:123",
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


def _create_booklist(db_session: Session, owner: User, **fields) -> BookList:
    booklist = BookList(**fields)
    owner.book_lists.append(booklist)
    db_session.commit()
    db_session.refresh(booklist)
    return booklist


@pytest.fixture
def sample_booklist(db_session: Session, sample_user: User) -> BookList:
    """An empty public booklist owned by sample_user."""
    return _create_booklist(
        db_session,
        sample_user,
        name="Sci-Fi",
        description="Space operas",
        visibility="public",
    )


@pytest.fixture
def private_booklist(db_session: Session, sample_user: User) -> BookList:
    return _create_booklist(
        db_session,
        sample_user,
        name="Secret",
        description="Guilty pleasures",
        visibility="private",
    )


@pytest.fixture
def booklist_with_book(
    db_session: Session,
    sample_booklist: BookList,
    sample_book: Book,
) -> BookList:
    sample_booklist.books.append(sample_book)
    db_session.commit()
    db_session.refresh(sample_booklist)
    return sample_booklist


@pytest.fixture
def sample_review(
    db_session: Session,
    sample_booklist: BookList,
    second_user: User,
) -> Review:
    """A public review of sample_booklist written by second_user."""
    review = Review(review="Great picks!", user=second_user)
    sample_booklist.reviews.append(review)
    db_session.commit()
    db_session.refresh(review)
    return review
