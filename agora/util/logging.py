"""Standard library logging bridged into Logfire.

Application code logs through ``logfire`` directly. Third-party libraries
(uvicorn, alembic, asyncpg, Pillow) use the ``logging`` module; routing
those records through Logfire keeps them in the same trace as the request
or job that produced them.
"""

import logging

import logfire

from agora.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "PIL", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by earlier imports
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
