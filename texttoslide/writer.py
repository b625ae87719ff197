from __future__ import annotations

from pathlib import Path

from loguru import logger

from texttoslide.errors import WriteError
from texttoslide.models import Deck

SLIDE_DELIMITER = "\n\n---\n\n"


def render_front_matter(theme: str) -> str:
    return f"---\nmarp: true\ntheme: {theme}\n---"


def render_deck(deck: Deck) -> str:
    if deck.rendered is not None:
        return deck.rendered.strip() + "\n"

    bodies = SLIDE_DELIMITER.join(s.to_markdown() for s in deck.slides)
    return f"{render_front_matter(deck.theme)}\n\n{bodies}\n"


def write_deck(content: str, output_dir: str | Path, filename: str) -> Path:
    directory = Path(output_dir)
    path = directory / filename
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Error saving slide {path}: {e}") from e

    logger.info("Marp slide saved: {}", path)
    return path
