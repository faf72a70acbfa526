"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.domain.clock import Clock
from agora.domain.repository import (
    ActionItemRepository,
    OpinionRepository,
    TalkSessionConsentRepository,
    TalkSessionRepository,
    UserRepository,
    VoteRepository,
)
from agora.domain.service import (
    ActionItemService,
    OpinionService,
    TalkSessionAccessControl,
    TalkSessionConsentService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_opinion_service(
        self, opinion_repository: OpinionRepository, vote_repository: VoteRepository
    ) -> OpinionService:
        """Provide opinion domain service."""
        return OpinionService(
            opinion_repository=opinion_repository, vote_repository=vote_repository
        )

    @provide
    def get_consent_service(
        self,
        consent_repository: TalkSessionConsentRepository,
        talk_session_repository: TalkSessionRepository,
        clock: Clock,
    ) -> TalkSessionConsentService:
        """Provide consent domain service."""
        return TalkSessionConsentService(
            consent_repository=consent_repository,
            talk_session_repository=talk_session_repository,
            clock=clock,
        )

    @provide
    def get_access_control(
        self,
        talk_session_repository: TalkSessionRepository,
        user_repository: UserRepository,
        consent_service: TalkSessionConsentService,
    ) -> TalkSessionAccessControl:
        """Provide talk session access control."""
        return TalkSessionAccessControl(
            talk_session_repository=talk_session_repository,
            user_repository=user_repository,
            consent_service=consent_service,
        )

    @provide
    def get_action_item_service(
        self, action_item_repository: ActionItemRepository
    ) -> ActionItemService:
        """Provide action item sequencing service."""
        return ActionItemService(action_item_repository=action_item_repository)
