from __future__ import annotations

from pathlib import Path

from loguru import logger

from texttoslide.errors import NotFoundError, ReadError
from texttoslide.models import RawDocument


def _resolve(path: str | Path) -> Path:
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return candidate.resolve()


def load_document(path: str | Path) -> RawDocument:
    try:
        resolved = _resolve(path)
        if not resolved.is_file():
            raise NotFoundError(f"Input file not found: {resolved}")
        # Decode the raw bytes so "\r\n" line endings reach the document unchanged.
        text = resolved.read_bytes().decode("utf-8")
    except (OSError, RuntimeError, UnicodeDecodeError) as e:
        raise ReadError(f"Error reading file {path}: {e}") from e

    logger.info("Input content loaded ({} characters)", len(text))
    return RawDocument(text=text, path=str(resolved))
