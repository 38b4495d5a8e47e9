#!/usr/bin/env python3
"""Bring the database schema up to date.

PostgreSQL is migrated with Alembic. A SQLite database (local development)
has no migration history, so its tables are created straight from the
table metadata instead.
"""

import asyncio
import sys

import logfire
from alembic import command
from alembic.config import Config

from agora.config import Settings
from agora.persistence.database import create_engine, create_schema
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


async def _create_sqlite_schema(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    backend = "sqlite" if settings.database.is_sqlite else "alembic"
    with logfire.span("run_migrations", backend=backend):
        try:
            if backend == "sqlite":
                asyncio.run(_create_sqlite_schema(settings))
            else:
                command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a broken schema
            raise

    logfire.info("Database schema is up to date", backend=backend)
    return 0


if __name__ == "__main__":
    sys.exit(main())
