#!/usr/bin/env python3
"""Start the Agora API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire before the app module is imported
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Agora API",
            environment=settings.environment,
            port=settings.port,
        )

        uvicorn.run(
            "agora.interface.api.app:app",
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
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
