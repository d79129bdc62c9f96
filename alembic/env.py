"""
Alembic environment for the booklist schema.

The database URL comes from DATABASE_URL through the application
settings; alembic.ini carries logging configuration only. On SQLite the
migrations run in batch mode, since SQLite cannot ALTER constraints in
place.

    alembic upgrade head                    # apply users/books/booklists/reviews
    alembic upgrade head --sql > out.sql    # offline: emit SQL only
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from app.config import get_settings
from app.database import Base
from app.models import Book, BookList, Review, User  # noqa: F401  registers the tables

settings = get_settings()

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

CONFIGURE_OPTIONS = {
    "target_metadata": target_metadata,
    "compare_type": True,
    "render_as_batch": settings.is_sqlite,
}


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting to the database."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **CONFIGURE_OPTIONS,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations over a single unpooled connection."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, **CONFIGURE_OPTIONS)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
