#!/usr/bin/env python3
"""Serve the Thanks API under uvicorn with startup errors reported to Logfire."""

import sys

import logfire
import uvicorn

from thanks.config import Settings
from thanks.util.logging import setup_logging
from thanks.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app module is imported, so startup failures are traced
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting Thanks API", host=settings.host, port=settings.port)
        uvicorn.run(
            "thanks.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
