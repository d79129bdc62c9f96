"""create booklist tables

Revision ID: 3f9c2a71d4b0
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a71d4b0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False, comment='Display name'),
        sa.Column('email', sa.String(length=255), nullable=False, comment="User's email address (used for login)"),
        sa.Column('hashed_password', sa.String(length=255), nullable=True, comment='Bcrypt hashed password (null for federated accounts)'),
        sa.Column('is_active', sa.Boolean(), nullable=False, comment='Set once the email address has been verified'),
        sa.Column('role', sa.String(length=20), nullable=False, comment='regular_user, manager or admin'),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False, comment='When the user registered'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('sub_title', sa.String(length=500), nullable=True),
        sa.Column('authors', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('categories', sa.String(length=500), nullable=True),
        sa.Column('publisher', sa.String(length=255), nullable=True),
        sa.Column('published_date', sa.String(length=50), nullable=True),
        sa.Column('page_count', sa.String(length=20), nullable=True),
        sa.Column('language', sa.String(length=20), nullable=True),
        sa.Column('sale_price', sa.JSON(), nullable=True),
        sa.Column('img_src', sa.Text(), nullable=True),
        sa.Column('self_link', sa.String(length=500), nullable=True, comment='External catalog identifier used to deduplicate books'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_self_link'), 'books', ['self_link'], unique=True)

    op.create_table('booklists',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('visibility', sa.String(length=10), nullable=False),
        sa.Column('last_edited', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_booklists_id'), 'booklists', ['id'], unique=False)
    op.create_index(op.f('ix_booklists_visibility'), 'booklists', ['visibility'], unique=False)
    op.create_index(op.f('ix_booklists_last_edited'), 'booklists', ['last_edited'], unique=False)
    op.create_index(op.f('ix_booklists_user_id'), 'booklists', ['user_id'], unique=False)

    op.create_table('booklist_books',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('booklist_id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['booklist_id'], ['booklists.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('booklist_id', 'book_id', name='uq_booklist_book'),
        comment='Ordered association between booklists and their books'
    )
    op.create_index(op.f('ix_booklist_books_booklist_id'), 'booklist_books', ['booklist_id'], unique=False)
    op.create_index(op.f('ix_booklist_books_book_id'), 'booklist_books', ['book_id'], unique=False)

    op.create_table('reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('booklist_id', sa.Integer(), nullable=False),
        sa.Column('review', sa.Text(), nullable=False),
        sa.Column('visibility', sa.String(length=10), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['booklist_id'], ['booklists.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_reviews_id'), 'reviews', ['id'], unique=False)
    op.create_index(op.f('ix_reviews_user_id'), 'reviews', ['user_id'], unique=False)
    op.create_index(op.f('ix_reviews_booklist_id'), 'reviews', ['booklist_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_reviews_booklist_id'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_user_id'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_id'), table_name='reviews')
    op.drop_table('reviews')
    op.drop_index(op.f('ix_booklist_books_book_id'), table_name='booklist_books')
    op.drop_index(op.f('ix_booklist_books_booklist_id'), table_name='booklist_books')
    op.drop_table('booklist_books')
    op.drop_index(op.f('ix_booklists_user_id'), table_name='booklists')
    op.drop_index(op.f('ix_booklists_last_edited'), table_name='booklists')
    op.drop_index(op.f('ix_booklists_visibility'), table_name='booklists')
    op.drop_index(op.f('ix_booklists_id'), table_name='booklists')
    op.drop_table('booklists')
    op.drop_index(op.f('ix_books_self_link'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
