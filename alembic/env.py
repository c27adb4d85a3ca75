"""Alembic env for the SQL store.

The URL comes from the same Settings the application reads (DATABASE_URL /
.env); ``alembic -x database_url=...`` overrides it for one run. The engine
is built with ``db.base.build_engine`` so migrations connect exactly as the
app does.
"""

from __future__ import annotations

import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import make_url

from audit_dashboard.core.config import Settings, settings as default_settings
from audit_dashboard.db.base import Base, build_engine

# Load all ORM models so Alembic can detect them
import audit_dashboard.domain  # noqa: F401

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = Base.metadata


def _migration_settings() -> Settings:
    override = context.get_x_argument(as_dictionary=True).get("database_url")
    if override:
        return default_settings.model_copy(update={"database_url": override})
    if default_settings.uses_memory_store:
        logger.warning("STORAGE_BACKEND=memory has no schema; migrating %s anyway", default_settings.database_url)
    return default_settings


def _configure_kwargs(url: str) -> dict:
    # SQLite can only ALTER through batch (copy-and-move) operations
    return {
        "target_metadata": target_metadata,
        "render_as_batch": make_url(url).get_backend_name() == "sqlite",
        "compare_type": True,
    }


def run_migrations_offline(settings: Settings) -> None:
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(settings.database_url),
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online(settings: Settings) -> None:
    engine = build_engine(settings)
    logger.info("Migrating %s", engine.url.render_as_string(hide_password=True))
    try:
        async with engine.connect() as connection:
            await connection.run_sync(
                lambda sync_conn: context.configure(
                    connection=sync_conn, **_configure_kwargs(settings.database_url)
                )
            )
            async with connection.begin():
                await connection.run_sync(lambda _: context.run_migrations())
    finally:
        await engine.dispose()


_settings = _migration_settings()
if context.is_offline_mode():
    run_migrations_offline(_settings)
else:
    asyncio.run(run_migrations_online(_settings))
