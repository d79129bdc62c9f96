"""
Test Suite for Booklist API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_auth.py: /api/auth registration, login, user endpoints, token checks
- test_books.py: /api/book endpoints and the public book view
- test_booklists.py: /api/book-list endpoints and public booklist views
- test_reviews.py: /api/review endpoints and public review listing
- test_email.py: /api/email endpoints (Resend patched)
- test_admin.py: /admin panel
- test_scenario.py: end-to-end user journey

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_booklists.py

    # Run with verbose output
    pytest -v
"""
