#!/usr/bin/env python3
"""Serve the Agora API with uvicorn.

Logfire is configured here, before the app module is imported, so that
startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    bind_host = "127.0.0.1" if settings.environment == "development" else "0.0.0.0"
    logfire.info(
        "Starting Agora API",
        host=bind_host,
        port=settings.port,
        environment=settings.environment,
    )

    try:
        uvicorn.run(
            "agora.interface.api.app:app",
            host=bind_host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
