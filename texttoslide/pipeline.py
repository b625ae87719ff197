from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from loguru import logger

from texttoslide.downstream import DownstreamResult
from texttoslide.errors import ConfigError, GenerationError
from texttoslide.loader import load_document
from texttoslide.models import Deck, RawDocument
from texttoslide.strategies import GenerationStrategy
from texttoslide.writer import render_deck, write_deck


class PromptInvoker(Protocol):
    def invoke(self, deck_path: Path, prompt_dir: Path) -> DownstreamResult: ...


@dataclass(frozen=True)
class RunOptions:
    input_path: Path
    output_dir: Path
    slide_filename: str | None = None
    theme: str = "default"
    generate_prompts: bool = True
    prompt_dir: Path | None = None

    def resolved_slide_filename(self) -> str:
        return self.slide_filename or f"{Path(self.input_path).stem}_slide.md"

    def resolved_prompt_dir(self) -> Path:
        return Path(self.prompt_dir) if self.prompt_dir else Path(self.output_dir) / "prompts"


@dataclass(frozen=True)
class RunResult:
    slide_path: Path
    deck: Deck
    prompt_dir: Path | None = None
    warnings: list[str] = field(default_factory=list)


async def produce_deck(document: RawDocument, theme: str, strategy: GenerationStrategy) -> Deck:
    if document.is_blank():
        raise ConfigError("Input document is empty")

    deck = await strategy.produce(document, theme)
    if not deck.is_prerendered and not deck.slides:
        raise GenerationError(f"{strategy.name} strategy produced no slides")
    return deck


async def generate_slides_for_file(
    options: RunOptions,
    strategy: GenerationStrategy,
    invoker: PromptInvoker | None = None,
) -> RunResult:
    logger.info("Reading input file: {}", options.input_path)
    document = load_document(options.input_path)

    logger.info("Using {} strategy", strategy.name)
    deck = await produce_deck(document, options.theme, strategy)

    slide_path = write_deck(
        render_deck(deck),
        options.output_dir,
        options.resolved_slide_filename(),
    )

    prompt_dir: Path | None = None
    warnings: list[str] = []
    if options.generate_prompts and invoker is not None:
        result = invoker.invoke(slide_path, options.resolved_prompt_dir())
        if result.ok:
            prompt_dir = result.prompt_dir
        else:
            logger.warning(
                "Prompt generation failed, but slide was created: {}", result.error)
            warnings.append(str(result.error))

    logger.info("Processing complete! Slide file: {}", slide_path)
    if prompt_dir is not None:
        logger.info("Prompts directory: {}", prompt_dir)

    return RunResult(slide_path=slide_path, deck=deck, prompt_dir=prompt_dir, warnings=warnings)
