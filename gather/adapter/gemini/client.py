"""Gemini text generation client.

Calls the ``generateContent`` REST endpoint and asks for a JSON response.
The returned text is untrusted; callers validate it.
"""

import httpx
import logfire

from gather.adapter.error import GenerationError
from gather.domain.service.insight_service import TextGenerator


class GeminiTextGenerator(TextGenerator):
    """Base class for Gemini generators.

    Provides type distinction for dependency injection.
    """

    pass


class RealGeminiTextGenerator(GeminiTextGenerator):
    """Gemini REST client with a bounded request timeout."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Gemini client.

        Args:
            api_key: Gemini API key; generation is disabled without one
            model: Model name, e.g. gemini-2.0-flash
            base_url: API root including the version segment
            timeout_seconds: Total timeout per request
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str, *, temperature: float, top_p: float) -> str:
        """Generate a JSON completion.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature
            top_p: Nucleus sampling cutoff

        Returns:
            Concatenated text of the first candidate

        Raises:
            GenerationError: If no API key is configured, the request fails or
                times out, or the response carries no text
        """
        if not self.api_key:
            raise GenerationError("Gemini API key is not configured")

        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "topP": top_p,
                "responseMimeType": "application/json",
            },
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.post(
                    self.endpoint,
                    json=body,
                    headers={"x-goog-api-key": self.api_key},
                )
        except httpx.TimeoutException as e:
            logfire.error("Gemini request timed out", model=self.model)
            raise GenerationError(f"Gemini request timed out: {e}")
        except httpx.HTTPError as e:
            logfire.error("Gemini request HTTP error", model=self.model, error=str(e))
            raise GenerationError(f"HTTP error during generation: {e}")

        if response.status_code != 200:
            logfire.error(
                "Gemini generation failed",
                model=self.model,
                status_code=response.status_code,
                error=response.text[:500],
            )
            raise GenerationError(f"Generation failed: {response.status_code}")

        try:
            payload = response.json()
            parts = payload["candidates"][0]["content"]["parts"]
            text = "".join(part.get("text", "") for part in parts)
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logfire.error("Gemini response malformed", model=self.model, error=str(e))
            raise GenerationError(f"Malformed generation response: {e}")

        if not text.strip():
            raise GenerationError("Generation returned no text")

        logfire.info("Gemini generation completed", model=self.model, length=len(text))
        return text


class MockGeminiTextGenerator(GeminiTextGenerator):
    """Scriptable generator for testing.

    Returns queued responses in order, then ``default_response``. Queue an
    exception instance to make a call fail. Every call is recorded.
    """

    def __init__(self, default_response: str | None = None) -> None:
        self.default_response = default_response
        self.responses: list[str | Exception] = []
        self.calls: list[dict] = []

    def queue(self, *responses: str | Exception) -> None:
        """Queue responses for the next calls."""
        self.responses.extend(responses)

    async def generate(self, prompt: str, *, temperature: float, top_p: float) -> str:
        """Return the next scripted response."""
        self.calls.append(
            {"prompt": prompt, "temperature": temperature, "top_p": top_p}
        )

        response: str | Exception | None
        if self.responses:
            response = self.responses.pop(0)
        else:
            response = self.default_response

        if isinstance(response, Exception):
            raise response
        if response is None:
            raise GenerationError("Mock generator has no scripted response")
        return response
