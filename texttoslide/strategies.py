from __future__ import annotations

import re
from typing import Protocol

from loguru import logger

from texttoslide.ai.prompt import deck_prompt
from texttoslide.ai.text_service import (TextService, build_text_service,
                                         has_credentials)
from texttoslide.config import Settings
from texttoslide.errors import ConfigError, GenerationError
from texttoslide.models import Deck, RawDocument
from texttoslide.segmenter import segment

_FENCE_OPEN = re.compile(r"^```[\w+-]*[ \t]*(?:\n|$)")
_FENCE_CLOSE = re.compile(r"\n?```$")


class GenerationStrategy(Protocol):
    name: str

    async def produce(self, document: RawDocument, theme: str) -> Deck: ...


def strip_code_fence(text: str) -> str:
    text = text.strip()
    text = _FENCE_OPEN.sub("", text, count=1)
    text = _FENCE_CLOSE.sub("", text, count=1)
    return text.strip()


class DeterministicStrategy:
    name = "deterministic"

    async def produce(self, document: RawDocument, theme: str) -> Deck:
        deck = segment(document, theme)
        logger.info("Segmented document into {} slides", len(deck.slides))
        return deck


class ModelBackedStrategy:
    """Asks a generative text service for the whole deck in one call.

    The returned text is kept as-is (after removing a wrapping code fence);
    it is not parsed back into slides.
    """

    name = "model"

    def __init__(self, service: TextService) -> None:
        self.service = service

    async def produce(self, document: RawDocument, theme: str) -> Deck:
        prompt = deck_prompt(document.text, theme)
        logger.info("Generating Marp slides with {}...", self.service.name)

        text = strip_code_fence(await self.service.generate(prompt))
        if not text:
            raise GenerationError("Model returned an empty deck")
        return Deck(theme=theme, rendered=text)


def build_strategy(settings: Settings, choice: str | None = None) -> GenerationStrategy:
    choice = (choice or settings.strategy or "auto").strip().lower()

    if choice == "deterministic":
        return DeterministicStrategy()
    if choice == "model":
        return ModelBackedStrategy(build_text_service(settings))
    if choice == "auto":
        if has_credentials(settings):
            return ModelBackedStrategy(build_text_service(settings))
        return DeterministicStrategy()

    raise ConfigError(
        f"Unknown strategy {choice!r} (expected auto, model or deterministic)")
