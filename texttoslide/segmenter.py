from __future__ import annotations

from dataclasses import dataclass, field

from texttoslide.models import Deck, RawDocument, Slide

SLIDE_HEADING = "# "


def is_slide_heading(line: str) -> bool:
    """True for a level-1 heading: exactly one '#' followed by a space."""
    return line.startswith(SLIDE_HEADING)


def _trim_blank_edges(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


@dataclass
class _SlideBuffer:
    title: str | None = None
    lines: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return self.title is None and not any(ln.strip() for ln in self.lines)

    def close(self) -> Slide | None:
        if self.is_empty():
            return None
        return Slide(title=self.title, lines=_trim_blank_edges(self.lines))


def segment(document: RawDocument, theme: str = "default") -> Deck:
    """Split a document into slides at level-1 headings.

    - A "# " heading opens a new slide, unless the current slide is still
      empty, in which case it becomes that slide's title
    - "## " headings, blank lines and all other lines stay in the body verbatim
    - Slides without any non-whitespace content are dropped, so a blank
      document yields a deck with no slides
    """

    slides: list[Slide] = []
    current = _SlideBuffer()

    for line in document.lines:
        if is_slide_heading(line):
            if current.is_empty():
                current = _SlideBuffer(title=line)
                continue
            closed = current.close()
            if closed is not None:
                slides.append(closed)
            current = _SlideBuffer(title=line)
            continue
        current.lines.append(line)

    closed = current.close()
    if closed is not None:
        slides.append(closed)

    return Deck(slides=slides, theme=theme)
