#!/usr/bin/env python3
"""Close talk sessions whose end time has passed.

Meant to be run periodically (cron or a scheduled job). Each session is
closed in its own transaction, so one failure does not block the batch.
"""

import asyncio
import sys

import logfire

from agora.application.usecase.talk_session import ProcessEndedTalkSessionsUseCase
from agora.config import Settings
from agora.util.di.container import create_container
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


async def run(limit: int | None) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ProcessEndedTalkSessionsUseCase)
            result = await use_case.execute(limit=limit)
    finally:
        await container.close()

    logfire.info(
        "Ended talk sessions processed",
        processed=len(result.processed_ids),
        failed=len(result.failed_ids),
    )
    return 1 if result.failed_ids else 0


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    limit = int(sys.argv[1]) if len(sys.argv) > 1 else None
    return asyncio.run(run(limit))


if __name__ == "__main__":
    sys.exit(main())
