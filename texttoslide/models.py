from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RawDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    path: str | None = None

    @property
    def lines(self) -> list[str]:
        # Split on "\n" only so "\r" and other characters stay verbatim.
        return self.text.split("\n")

    def is_blank(self) -> bool:
        return not self.text.strip()


class Slide(BaseModel):
    model_config = ConfigDict(frozen=True)

    # The heading line exactly as written, e.g. "# Overview".
    title: str | None = None
    lines: list[str] = Field(default_factory=list)

    @property
    def body(self) -> str:
        return "\n".join(self.lines).strip()

    def to_markdown(self) -> str:
        parts = [self.title] if self.title is not None else []
        parts.extend(self.lines)
        return "\n".join(parts).strip()


class Deck(BaseModel):
    slides: list[Slide] = Field(default_factory=list)
    theme: str = "default"
    # Complete Marp text returned by a model; such a deck has no slide records.
    rendered: str | None = None

    @property
    def is_prerendered(self) -> bool:
        return self.rendered is not None


StrategyChoice = Literal["auto", "model", "deterministic"]


class SlideRequest(BaseModel):
    text: str = Field(min_length=1)
    theme: str = "default"
    strategy: StrategyChoice = "auto"


class SlideResponse(BaseModel):
    markdown: str
    strategy: str
    slide_count: int | None = None
