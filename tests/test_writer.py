from pathlib import Path

import pytest

from texttoslide.errors import WriteError
from texttoslide.models import Deck, RawDocument, Slide
from texttoslide.segmenter import segment
from texttoslide.writer import render_deck, render_front_matter, write_deck


def test_render_deck_front_matter_and_delimiters():
    deck = segment(RawDocument(text="# A\nbody1\n# B\nbody2\n"), "default")

    assert render_deck(deck) == (
        "---\nmarp: true\ntheme: default\n---\n\n"
        "# A\nbody1\n\n---\n\n# B\nbody2\n"
    )


def test_theme_appears_once_in_front_matter():
    deck = Deck(slides=[Slide(title="# Dark mode", lines=["theme talk"])], theme="uncover")

    content = render_deck(deck)
    front_matter = content[: content.index("\n---", 3) + 4]

    assert front_matter == render_front_matter("uncover")
    assert front_matter.count("uncover") == 1


def test_prerendered_deck_is_written_as_is():
    deck = Deck(theme="gaia", rendered="---\nmarp: true\ntheme: gaia\n---\n\n# Hi\n\n")

    assert render_deck(deck) == "---\nmarp: true\ntheme: gaia\n---\n\n# Hi\n"


def test_write_deck_creates_missing_directories(tmp_path: Path):
    out_dir = tmp_path / "a" / "b"

    path = write_deck("hello\n", out_dir, "deck.md")

    assert path == out_dir / "deck.md"
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_write_deck_overwrites_existing_file(tmp_path: Path):
    (tmp_path / "deck.md").write_text("old content", encoding="utf-8")

    path = write_deck("new", tmp_path, "deck.md")

    assert path.read_text(encoding="utf-8") == "new"


def test_write_deck_reports_io_failure(tmp_path: Path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(WriteError):
        write_deck("content", blocker, "deck.md")
