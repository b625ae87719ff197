"""
Shared fixtures for the text-to-slide test suite.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from texttoslide.config import Settings


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect loguru output as 'LEVEL: message' strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda m: messages.append(str(m).rstrip("\n")),
        level="DEBUG",
        format="{level}: {message}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def no_key_settings() -> Settings:
    """Settings with every credential cleared, independent of the environment."""
    return Settings(
        ai_provider="auto",
        gemini_api_key=None,
        openai_api_key=None,
        strategy="auto",
    )


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("# A\nbody1\n# B\nbody2\n", encoding="utf-8")
    return path
