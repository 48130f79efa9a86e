"""Mock Gemini providers for testing."""

from dishka import Scope, provide

from gather.adapter.gemini import MockGeminiTextGenerator
from gather.domain.service import TextGenerator
from gather.util.di.infrastructure.gemini import GeminiProvider


class MockGeminiProvider(GeminiProvider):
    """Mock Gemini provider using a scriptable generator.

    Nothing is scripted by default, so every insight falls back unless a
    test queues a response.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_text_generator(self) -> TextGenerator:
        """Provide mock text generator."""
        return MockGeminiTextGenerator()
