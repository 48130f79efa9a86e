"""Domain layer DI providers."""

from dishka import Scope, provide

from gather.config import AISettings, AnalyticsSettings, AuthSettings
from gather.domain.repository import (
    ActivityRepository,
    EventRepository,
    InvitationRepository,
    TransactionManager,
    UserRepository,
)
from gather.domain.service import (
    AnalyticsService,
    ConflictService,
    EventService,
    InsightService,
    InvitationService,
    JWTService,
    RecommendationService,
    TextGenerator,
    UserService,
)
from gather.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_conflict_service(self) -> ConflictService:
        """Provide conflict aggregation service (stateless)."""
        return ConflictService()

    @provide(scope=Scope.APP)
    def get_recommendation_service(
        self, conflict_service: ConflictService
    ) -> RecommendationService:
        """Provide recommendation scorer (stateless)."""
        return RecommendationService(conflict_service=conflict_service)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        invitation_repository: InvitationRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            invitation_repository=invitation_repository,
        )

    @provide
    def get_event_service(
        self,
        event_repository: EventRepository,
        invitation_repository: InvitationRepository,
        activity_repository: ActivityRepository,
        transaction_manager: TransactionManager,
        analytics_settings: AnalyticsSettings,
    ) -> EventService:
        """Provide event domain service."""
        return EventService(
            event_repository=event_repository,
            invitation_repository=invitation_repository,
            activity_repository=activity_repository,
            transaction_manager=transaction_manager,
            analytics_settings=analytics_settings,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        event_repository: EventRepository,
        user_repository: UserRepository,
        event_service: EventService,
        transaction_manager: TransactionManager,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            event_repository=event_repository,
            user_repository=user_repository,
            event_service=event_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_analytics_service(
        self,
        event_service: EventService,
        invitation_service: InvitationService,
        activity_repository: ActivityRepository,
        conflict_service: ConflictService,
        analytics_settings: AnalyticsSettings,
    ) -> AnalyticsService:
        """Provide analytics aggregation service."""
        return AnalyticsService(
            event_service=event_service,
            invitation_service=invitation_service,
            activity_repository=activity_repository,
            conflict_service=conflict_service,
            analytics_settings=analytics_settings,
        )

    @provide
    def get_insight_service(
        self,
        text_generator: TextGenerator,
        recommendation_service: RecommendationService,
        ai_settings: AISettings,
    ) -> InsightService:
        """Provide insight orchestration service."""
        return InsightService(
            text_generator=text_generator,
            recommendation_service=recommendation_service,
            ai_settings=ai_settings,
        )
