"""Process ended talk sessions use case."""

import logfire
from pydantic import BaseModel

from agora.config import TalkSessionSettings
from agora.domain.clock import Clock
from agora.domain.model.talk_session import TalkSession
from agora.domain.repository import (
    DomainEventRepository,
    TalkSessionRepository,
    TransactionManager,
    VoteRepository,
)


class ProcessEndedTalkSessionsResponse(BaseModel):
    processed_ids: list[str]
    failed_ids: list[str]


class ProcessEndedTalkSessionsUseCase:
    """Closes sessions whose end time has passed.

    Meant to run periodically. Each session is closed in its own
    transaction so one failure does not hold back the rest of the batch.
    """

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        vote_repository: VoteRepository,
        event_repository: DomainEventRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
        settings: TalkSessionSettings,
    ) -> None:
        self.talk_session_repository = talk_session_repository
        self.vote_repository = vote_repository
        self.event_repository = event_repository
        self.transaction_manager = transaction_manager
        self.clock = clock
        self.settings = settings

    async def execute(self, limit: int | None = None) -> ProcessEndedTalkSessionsResponse:
        now = self.clock.now()
        limit = limit or self.settings.end_batch_size

        with logfire.span("process_ended_talk_sessions", limit=limit):
            talk_sessions = await self.talk_session_repository.find_unprocessed_ended(
                now, limit
            )

            processed: list[str] = []
            failed: list[str] = []
            for talk_session in talk_sessions:
                try:
                    await self._end(talk_session)
                except Exception as e:
                    logfire.error(
                        "Failed to end talk session",
                        talk_session_id=str(talk_session.id),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    failed.append(str(talk_session.id))
                else:
                    processed.append(str(talk_session.id))

            logfire.info(
                "Ended talk sessions processed",
                processed=len(processed),
                failed=len(failed),
            )
            return ProcessEndedTalkSessionsResponse(
                processed_ids=processed, failed_ids=failed
            )

    async def _end(self, talk_session: TalkSession) -> None:
        async with self.transaction_manager.transaction():
            participant_ids = await self.vote_repository.find_participant_ids(
                talk_session.id
            )
            talk_session.end_session(participant_ids, self.clock.now())
            events = talk_session.pull_events()
            await self.talk_session_repository.update(talk_session)
            await self.event_repository.append(events)
