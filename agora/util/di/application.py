"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.analysis_trigger import AnalysisTrigger
from agora.application.background import BackgroundTasks
from agora.application.usecase.analysis import ApplyFeedbackUseCase
from agora.application.usecase.opinion import (
    GetOpinionUseCase,
    GetReportSummaryUseCase,
    ReportOpinionUseCase,
    SolveReportUseCase,
    SubmitOpinionUseCase,
)
from agora.application.usecase.talk_session import (
    AddConclusionUseCase,
    CheckRestrictionsUseCase,
    EditTalkSessionUseCase,
    ProcessEndedTalkSessionsUseCase,
    StartTalkSessionUseCase,
    TakeConsentUseCase,
)
from agora.application.usecase.timeline import (
    AddActionItemUseCase,
    EditActionItemUseCase,
)
from agora.application.usecase.vote import VoteUseCase
from agora.config import AnalysisSettings, TalkSessionSettings
from agora.domain.clock import Clock
from agora.domain.repository import (
    ActionItemRepository,
    AnalysisReportRepository,
    ConclusionRepository,
    DetachedAnalysisReportReader,
    DomainEventRepository,
    OpinionRepository,
    ReportRepository,
    TalkSessionRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from agora.domain.service import (
    ActionItemService,
    AnalysisService,
    ImageInspector,
    ImageStorage,
    OpinionService,
    TalkSessionAccessControl,
    TalkSessionConsentService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_analysis_trigger(
        self,
        analysis_service: AnalysisService,
        report_reader: DetachedAnalysisReportReader,
        background_tasks: BackgroundTasks,
        clock: Clock,
        settings: AnalysisSettings,
    ) -> AnalysisTrigger:
        """Provide the post-vote analysis dispatcher."""
        return AnalysisTrigger(
            analysis_service=analysis_service,
            report_reader=report_reader,
            background_tasks=background_tasks,
            clock=clock,
            settings=settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        vote_repository: VoteRepository,
        opinion_service: OpinionService,
        access_control: TalkSessionAccessControl,
        transaction_manager: TransactionManager,
        analysis_trigger: AnalysisTrigger,
        clock: Clock,
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(
            opinion_repository=opinion_repository,
            talk_session_repository=talk_session_repository,
            vote_repository=vote_repository,
            opinion_service=opinion_service,
            access_control=access_control,
            transaction_manager=transaction_manager,
            analysis_trigger=analysis_trigger,
            clock=clock,
        )

    # Opinion use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_opinion_use_case(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        vote_repository: VoteRepository,
        access_control: TalkSessionAccessControl,
        image_inspector: ImageInspector,
        image_storage: ImageStorage,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> SubmitOpinionUseCase:
        """Provide submit opinion use case."""
        return SubmitOpinionUseCase(
            opinion_repository=opinion_repository,
            talk_session_repository=talk_session_repository,
            vote_repository=vote_repository,
            access_control=access_control,
            image_inspector=image_inspector,
            image_storage=image_storage,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_report_opinion_use_case(
        self,
        opinion_repository: OpinionRepository,
        report_repository: ReportRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> ReportOpinionUseCase:
        """Provide report opinion use case."""
        return ReportOpinionUseCase(
            opinion_repository=opinion_repository,
            report_repository=report_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_solve_report_use_case(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        report_repository: ReportRepository,
        transaction_manager: TransactionManager,
    ) -> SolveReportUseCase:
        """Provide solve report use case."""
        return SolveReportUseCase(
            opinion_repository=opinion_repository,
            talk_session_repository=talk_session_repository,
            report_repository=report_repository,
            transaction_manager=transaction_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_opinion_use_case(
        self, opinion_service: OpinionService, report_repository: ReportRepository
    ) -> GetOpinionUseCase:
        """Provide get opinion use case."""
        return GetOpinionUseCase(
            opinion_service=opinion_service, report_repository=report_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_report_summary_use_case(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        report_repository: ReportRepository,
    ) -> GetReportSummaryUseCase:
        """Provide report summary use case."""
        return GetReportSummaryUseCase(
            opinion_repository=opinion_repository,
            talk_session_repository=talk_session_repository,
            report_repository=report_repository,
        )

    # Talk session use cases
    @provide(scope=Scope.REQUEST)
    def get_start_talk_session_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        user_repository: UserRepository,
        event_repository: DomainEventRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
        settings: TalkSessionSettings,
    ) -> StartTalkSessionUseCase:
        """Provide start talk session use case."""
        return StartTalkSessionUseCase(
            talk_session_repository=talk_session_repository,
            user_repository=user_repository,
            event_repository=event_repository,
            transaction_manager=transaction_manager,
            clock=clock,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_talk_session_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> EditTalkSessionUseCase:
        """Provide edit talk session use case."""
        return EditTalkSessionUseCase(
            talk_session_repository=talk_session_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_take_consent_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        user_repository: UserRepository,
        consent_service: TalkSessionConsentService,
        transaction_manager: TransactionManager,
    ) -> TakeConsentUseCase:
        """Provide take consent use case."""
        return TakeConsentUseCase(
            talk_session_repository=talk_session_repository,
            user_repository=user_repository,
            consent_service=consent_service,
            transaction_manager=transaction_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_check_restrictions_use_case(
        self, access_control: TalkSessionAccessControl
    ) -> CheckRestrictionsUseCase:
        """Provide check restrictions use case."""
        return CheckRestrictionsUseCase(access_control=access_control)

    @provide(scope=Scope.REQUEST)
    def get_add_conclusion_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        conclusion_repository: ConclusionRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> AddConclusionUseCase:
        """Provide add conclusion use case."""
        return AddConclusionUseCase(
            talk_session_repository=talk_session_repository,
            conclusion_repository=conclusion_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_process_ended_talk_sessions_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        vote_repository: VoteRepository,
        event_repository: DomainEventRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
        settings: TalkSessionSettings,
    ) -> ProcessEndedTalkSessionsUseCase:
        """Provide process ended talk sessions use case."""
        return ProcessEndedTalkSessionsUseCase(
            talk_session_repository=talk_session_repository,
            vote_repository=vote_repository,
            event_repository=event_repository,
            transaction_manager=transaction_manager,
            clock=clock,
            settings=settings,
        )

    # Timeline use cases
    @provide(scope=Scope.REQUEST)
    def get_add_action_item_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        action_item_service: ActionItemService,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> AddActionItemUseCase:
        """Provide add action item use case."""
        return AddActionItemUseCase(
            talk_session_repository=talk_session_repository,
            action_item_service=action_item_service,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_action_item_use_case(
        self,
        talk_session_repository: TalkSessionRepository,
        action_item_repository: ActionItemRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> EditActionItemUseCase:
        """Provide edit action item use case."""
        return EditActionItemUseCase(
            talk_session_repository=talk_session_repository,
            action_item_repository=action_item_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    # Analysis use cases
    @provide(scope=Scope.REQUEST)
    def get_apply_feedback_use_case(
        self,
        analysis_report_repository: AnalysisReportRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> ApplyFeedbackUseCase:
        """Provide apply feedback use case."""
        return ApplyFeedbackUseCase(
            analysis_report_repository=analysis_report_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )
