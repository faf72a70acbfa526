"""PostgreSQL implementation of TalkSessionConsent repository."""

from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import TalkSessionAlreadyConsentedError
from agora.domain.model import TalkSessionConsent
from agora.domain.repository import TalkSessionConsentRepository
from agora.domain.value import TalkSessionId, UserId
from agora.persistence.database import violated_constraint
from agora.persistence.mappers import consent_to_dict, row_to_consent
from agora.persistence.tables import consents_table


class PostgresTalkSessionConsentRepository(TalkSessionConsentRepository):
    """PostgreSQL implementation of TalkSessionConsentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, consent: TalkSessionConsent) -> TalkSessionConsent:
        """Insert a consent.

        Raises:
            TalkSessionAlreadyConsentedError: If the primary key is taken
        """
        stmt = insert(consents_table).values(**consent_to_dict(consent))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            if violated_constraint(e) != "pk_talk_session_consent":
                raise
            raise TalkSessionAlreadyConsentedError(
                consent.talk_session_id, consent.user_id
            ) from e
        return consent

    async def find(
        self, talk_session_id: TalkSessionId, user_id: UserId
    ) -> Optional[TalkSessionConsent]:
        stmt = select(consents_table).where(
            and_(
                consents_table.c.talk_session_id == talk_session_id,
                consents_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_consent(row._asdict()) if row else None
