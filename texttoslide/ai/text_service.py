from __future__ import annotations

from typing import Any, Protocol

from google import genai
from openai import AsyncOpenAI

from texttoslide.config import Settings
from texttoslide.errors import ConfigError, GenerationError


class TextService(Protocol):
    name: str

    async def generate(self, prompt: str) -> str: ...


def _extract_gemini_text(response: Any) -> str | None:
    candidates = getattr(response, "candidates", None) or []
    for candidate in candidates:
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) if content is not None else None
        if not parts:
            continue
        for part in parts:
            part_text = getattr(part, "text", None)
            if part_text:
                return str(part_text)
    return None


class GeminiTextService:
    name = "gemini"

    def __init__(self, api_key: str, model: str) -> None:
        self.model = model
        self._client = genai.Client(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        try:
            resp = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            raise GenerationError(
                f"Gemini request failed ({type(e).__name__}): {e}") from e

        if not getattr(resp, "candidates", None):
            raise GenerationError("No response from API")

        text = _extract_gemini_text(resp)
        if not text:
            raise GenerationError("Gemini returned an empty response")
        return text


class OpenAITextService:
    name = "openai"

    def __init__(self, api_key: str, model: str) -> None:
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        try:
            resp = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.2,
            )
        except Exception as e:
            raise GenerationError(
                f"OpenAI request failed ({type(e).__name__}): {e}") from e

        if not resp.choices:
            raise GenerationError("No response from API")

        text = resp.choices[0].message.content
        if not text:
            raise GenerationError("OpenAI returned an empty response")
        return text


def has_credentials(settings: Settings) -> bool:
    """True when the key for the selected AI_PROVIDER is configured."""
    provider = (settings.ai_provider or "auto").strip().lower()
    if provider == "gemini":
        return bool(settings.gemini_api_key)
    if provider == "openai":
        return bool(settings.openai_api_key)
    return bool(settings.gemini_api_key or settings.openai_api_key)


def build_text_service(settings: Settings) -> TextService:
    provider = (settings.ai_provider or "auto").strip().lower()

    if provider == "gemini":
        if not settings.gemini_api_key:
            raise ConfigError("GEMINI_API_KEY is not set in .env")
        return GeminiTextService(settings.gemini_api_key, settings.gemini_model)
    if provider == "openai":
        if not settings.openai_api_key:
            raise ConfigError("OPENAI_API_KEY is not set in .env")
        return OpenAITextService(settings.openai_api_key, settings.openai_model)
    if provider != "auto":
        raise ConfigError(
            f"Unknown AI_PROVIDER {provider!r} (expected auto, gemini or openai)")

    # Auto mode: Gemini first (if configured), then OpenAI.
    if settings.gemini_api_key:
        return GeminiTextService(settings.gemini_api_key, settings.gemini_model)
    if settings.openai_api_key:
        return OpenAITextService(settings.openai_api_key, settings.openai_model)
    raise ConfigError("GEMINI_API_KEY is not set in .env")
