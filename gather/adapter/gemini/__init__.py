"""Gemini text generation adapter."""

from .client import (
    GeminiTextGenerator,
    MockGeminiTextGenerator,
    RealGeminiTextGenerator,
)

__all__ = ["GeminiTextGenerator", "MockGeminiTextGenerator", "RealGeminiTextGenerator"]
