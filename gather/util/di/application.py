"""Application layer DI providers."""

from dishka import Scope, provide

from gather.application.usecase.analytics import GetOverviewUseCase
from gather.application.usecase.auth import GetCurrentUserUseCase, SyncUserUseCase
from gather.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    UpdateEventUseCase,
)
from gather.application.usecase.insight import (
    DashboardInsightUseCase,
    EventRecommendationUseCase,
    SchedulingAssistantUseCase,
)
from gather.application.usecase.invitation import (
    CreateInvitationsUseCase,
    ListInvitationsUseCase,
    UpdateRsvpUseCase,
)
from gather.config import AnalyticsSettings, AuthSettings
from gather.domain.service import (
    AnalyticsService,
    EventService,
    InsightService,
    InvitationService,
    JWTService,
    UserService,
)
from gather.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_sync_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> SyncUserUseCase:
        """Provide sync user use case."""
        return SyncUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Event use cases
    @provide(scope=Scope.REQUEST)
    def get_create_event_use_case(
        self, event_service: EventService
    ) -> CreateEventUseCase:
        """Provide create event use case."""
        return CreateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_update_event_use_case(
        self, event_service: EventService
    ) -> UpdateEventUseCase:
        """Provide update event use case."""
        return UpdateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_event_use_case(
        self, event_service: EventService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_event_use_case(self, event_service: EventService) -> GetEventUseCase:
        """Provide get event use case."""
        return GetEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_list_events_use_case(
        self, event_service: EventService
    ) -> ListEventsUseCase:
        """Provide list events use case."""
        return ListEventsUseCase(event_service=event_service)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> CreateInvitationsUseCase:
        """Provide create invitations use case."""
        return CreateInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_rsvp_use_case(
        self, invitation_service: InvitationService
    ) -> UpdateRsvpUseCase:
        """Provide update RSVP use case."""
        return UpdateRsvpUseCase(invitation_service=invitation_service)

    # Analytics and insight use cases
    @provide(scope=Scope.REQUEST)
    def get_overview_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetOverviewUseCase:
        """Provide analytics overview use case."""
        return GetOverviewUseCase(analytics_service=analytics_service)

    @provide(scope=Scope.REQUEST)
    def get_scheduling_assistant_use_case(
        self,
        event_service: EventService,
        insight_service: InsightService,
        analytics_settings: AnalyticsSettings,
    ) -> SchedulingAssistantUseCase:
        """Provide scheduling assistant use case."""
        return SchedulingAssistantUseCase(
            event_service=event_service,
            insight_service=insight_service,
            analytics_settings=analytics_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_dashboard_insight_use_case(
        self, analytics_service: AnalyticsService, insight_service: InsightService
    ) -> DashboardInsightUseCase:
        """Provide dashboard insight use case."""
        return DashboardInsightUseCase(
            analytics_service=analytics_service, insight_service=insight_service
        )

    @provide(scope=Scope.REQUEST)
    def get_event_recommendation_use_case(
        self,
        event_service: EventService,
        insight_service: InsightService,
        analytics_settings: AnalyticsSettings,
    ) -> EventRecommendationUseCase:
        """Provide event recommendation use case."""
        return EventRecommendationUseCase(
            event_service=event_service,
            insight_service=insight_service,
            analytics_settings=analytics_settings,
        )
