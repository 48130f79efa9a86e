"""Core DI providers (non-mockable)."""

import logfire
from dishka import Scope, provide

from gather.config import AISettings, AnalyticsSettings, AuthSettings, Settings
from gather.util.di.base import ProviderBase
from gather.util.error import ConfigurationError

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Reject settings that must never reach a deployed environment.

    Raises:
        ConfigurationError: If production runs with the default JWT secret or
            without a positive generation timeout
    """
    if settings.environment == "production":
        if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
            logfire.error("Default JWT secret used in production")
            raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")

    if settings.ai.timeout_seconds <= 0:
        raise ConfigurationError("AI__TIMEOUT_SECONDS", "must be positive")

    if not settings.ai.api_key:
        logfire.warn(
            "No Gemini API key configured, insights use fallbacks",
            environment=settings.environment,
        )


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide checked application settings from environment."""
        settings = Settings()
        check_settings(settings)
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_ai_settings(self, settings: Settings) -> AISettings:
        return settings.ai

    @provide(scope=Scope.APP)
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        return settings.analytics
