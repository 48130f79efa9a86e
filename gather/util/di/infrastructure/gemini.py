"""Gemini infrastructure providers."""

from dishka import Scope, provide

from gather.adapter.gemini import RealGeminiTextGenerator
from gather.config import AISettings
from gather.domain.service import TextGenerator
from gather.util.di.base import ProviderBase


class GeminiProvider(ProviderBase):
    """Gemini component base."""

    __mock_component__ = "gemini"


class ProdGeminiProvider(GeminiProvider):
    """Production Gemini provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_text_generator(self, ai_settings: AISettings) -> TextGenerator:
        """Provide Gemini text generator.

        Without an API key every call fails fast and insights fall back.

        Returns:
            Gemini text generator
        """
        return RealGeminiTextGenerator(
            api_key=ai_settings.api_key,
            model=ai_settings.model,
            base_url=ai_settings.base_url,
            timeout_seconds=ai_settings.timeout_seconds,
        )
