"""
NoteShelf Migration Environment
===============================

What:  Applies the revisions under versions/ to the categories/notes store.
How:   The URL comes from `-x url=...` when given, otherwise from
       noteshelf.config. Online runs reuse noteshelf.database.build_engine,
       so migrations connect with the same driver options as the API.
Who:   `alembic upgrade head`, `alembic downgrade -1`, `alembic revision
       --autogenerate`, run from the backend/ directory.
"""

import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from noteshelf.config import settings
from noteshelf.database import Base, build_engine

# Registers Category and Note on Base.metadata for --autogenerate
import noteshelf.models  # noqa: F401

alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

logger = logging.getLogger("alembic.env")


def _database_url() -> str:
    overrides = context.get_x_argument(as_dictionary=True)
    return overrides.get("url") or settings.database_url


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        **kwargs,
    )


def _apply_offline(url: str) -> None:
    """Write the migration SQL to stdout instead of executing it."""
    _configure(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _apply_on(connection: Connection) -> None:
    # SQLite cannot ALTER most constraints in place; batch mode recreates the table
    _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
    with context.begin_transaction():
        context.run_migrations()


async def _apply_online(url: str) -> None:
    engine = build_engine(url)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply_on)
    finally:
        await engine.dispose()


url = _database_url()
logger.info("Migrating %s", url.split("@")[-1])

if context.is_offline_mode():
    _apply_offline(url)
else:
    asyncio.run(_apply_online(url))
