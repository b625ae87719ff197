from pathlib import Path
from unittest.mock import patch

import pytest

from texttoslide.cli import _parse_bool, main
from texttoslide.config import Settings


@pytest.fixture(autouse=True)
def _keep_test_log_sinks():
    # main() replaces every loguru handler with one bound to sys.stderr.
    with patch("texttoslide.cli.configure_logging"):
        yield


def test_deterministic_run_without_prompts(input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    out_dir = tmp_path / "out"

    main([
        "--input", str(input_file),
        "--output", str(out_dir),
        "--strategy", "deterministic",
        "--generate-prompts", "false",
        "--theme", "gaia",
    ])

    slide_path = out_dir / "notes_slide.md"
    assert slide_path.read_text(encoding="utf-8").startswith(
        "---\nmarp: true\ntheme: gaia\n---\n")
    assert capsys.readouterr().out.strip() == str(slide_path)


def test_missing_input_exits_with_fatal_error(tmp_path: Path):
    out_dir = tmp_path / "out"

    with pytest.raises(SystemExit) as exc:
        main([
            "--input", str(tmp_path / "missing.txt"),
            "--output", str(out_dir),
            "--strategy", "deterministic",
        ])

    assert "Fatal error" in str(exc.value.code)
    assert "Input file not found" in str(exc.value.code)
    assert not out_dir.exists()


def test_model_strategy_without_key_fails_before_work(
    input_file: Path, tmp_path: Path, no_key_settings: Settings
):
    out_dir = tmp_path / "out"

    with patch("texttoslide.cli.settings", no_key_settings):
        with pytest.raises(SystemExit) as exc:
            main([
                "--input", str(input_file),
                "--output", str(out_dir),
                "--strategy", "model",
            ])

    assert "GEMINI_API_KEY" in str(exc.value.code)
    assert not out_dir.exists()


def test_missing_downstream_tool_still_succeeds(input_file: Path, tmp_path: Path):
    settings = Settings(prompt_tool="texttoslide-no-such-tool", prompt_script="")
    out_dir = tmp_path / "out"

    with patch("texttoslide.cli.settings", settings):
        main([
            "--input", str(input_file),
            "--output", str(out_dir),
            "--strategy", "deterministic",
            "--slide-output", "deck.md",
        ])

    assert (out_dir / "deck.md").exists()


def test_required_arguments():
    with pytest.raises(SystemExit) as exc:
        main(["--input", "notes.txt"])

    assert exc.value.code == 2


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("TRUE", True), ("yes", True), ("false", False), ("False", False), ("0", False), ("off", False)],
)
def test_parse_bool(value, expected):
    assert _parse_bool(value) is expected
