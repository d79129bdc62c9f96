"""
Services Package

Business logic kept apart from HTTP handling. Routers and the admin
panel call these; they raise app.exceptions errors, never HTTPException.

Current services:
- users.py: Registration, login, password updates, email verification
- catalog.py: Book records deduplicated by selfLink
- booklists.py: Booklist CRUD and list membership
- reviews.py: Review creation, hiding and listing
- email.py: Outbound email through Resend
- rate_limiter.py: Rate limiting with slowapi
- security.py: Password hashing and JWT utilities
"""
