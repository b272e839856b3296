# pylint: skip-file
# ruff: noqa
"""
Alembic environment for the booknotes schema.

URL resolution, first match wins:
    alembic -x db_url=sqlite+aiosqlite:///scratch.db upgrade head
    settings.DATABASE_URL (env var or .env)

Online migrations run over an async engine; offline mode (--sql) only
renders SQL. SQLite gets batch mode so ALTERs are emulated by table copies.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from booknotes.config.settings import settings

# Importing the package registers every table on Base.metadata
from booknotes.shared import models


config = context.config
config.set_main_option(
    "sqlalchemy.url",
    context.get_x_argument(as_dictionary=True).get("db_url", settings.DATABASE_URL),
)

if config.config_file_name is not None and config.get_section("loggers"):
    fileConfig(config.config_file_name)

target_metadata = models.Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_with_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
