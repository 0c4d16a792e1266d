"""Alembic environment for the storefront schema."""

from __future__ import annotations

import asyncio
import os
from logging.config import fileConfig
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context
from storefront_admin.infrastructure.db.metadata import metadata

config = context.config

_DEFAULT_ALEMBIC_URL = "sqlite:///./storefront.db"
_ASYNC_DRIVERS = ("+asyncpg", "+aiosqlite")


def _resolve_url() -> str:
    """Prefer an explicitly configured URL, then DATABASE_URL from env or `.env`."""

    configured = config.get_main_option("sqlalchemy.url") or _DEFAULT_ALEMBIC_URL
    if configured != _DEFAULT_ALEMBIC_URL:
        return configured

    load_dotenv(Path(__file__).resolve().parents[1] / ".env")
    return os.getenv("DATABASE_URL") or configured


if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

config.set_main_option("sqlalchemy.url", _resolve_url())


def _configure(connection: Connection) -> None:
    # site_settings column drops need copy-and-move on SQLite.
    context.configure(
        connection=connection,
        target_metadata=metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def _run_async(section: dict[str, str]) -> None:
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_configure)
    finally:
        await engine.dispose()


def run_migrations_offline() -> None:
    """Emit SQL for the configured URL without a live connection."""

    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations through a sync or async engine depending on the driver."""

    section = config.get_section(config.config_ini_section, {})
    url = section["sqlalchemy.url"]
    if any(driver in url for driver in _ASYNC_DRIVERS):
        asyncio.run(_run_async(section))
        return

    engine = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
