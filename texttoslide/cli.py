"""Command-line entry point: text file in, Marp deck (and image prompts) out."""

from __future__ import annotations

import argparse
import asyncio
import sys
import traceback
from pathlib import Path

from loguru import logger

from texttoslide.config import settings
from texttoslide.downstream import PromptPipelineInvoker
from texttoslide.errors import TextToSlideError
from texttoslide.pipeline import RunOptions, generate_slides_for_file
from texttoslide.strategies import build_strategy

_FALSY = {"false", "0", "no", "off"}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in _FALSY


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level,
               format="[Text to Slide] {level}: {message}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Marp slide deck from a text file")
    parser.add_argument("--input", required=True,
                        help="Input text file path")
    parser.add_argument("--output", required=True, help="Output directory")
    parser.add_argument(
        "--slide-output",
        default=None,
        help="Slide output filename (default: <input>_slide.md)",
    )
    parser.add_argument("--theme", default=None,
                        help="Marp theme (default: MARP_THEME or 'default')")
    parser.add_argument(
        "--generate-prompts",
        type=_parse_bool,
        default=True,
        metavar="true|false",
        help="Generate image prompts from the deck (default: true)",
    )
    parser.add_argument(
        "--prompt-dir",
        default=None,
        help="Directory for generated prompts (default: <output>/prompts)",
    )
    parser.add_argument(
        "--strategy",
        default=None,
        choices=["auto", "model", "deterministic"],
        help="Deck strategy (default: SLIDE_STRATEGY or 'auto': model when an API key is set)",
    )
    parser.add_argument("--debug", action="store_true",
                        help="Show full traceback for fatal errors")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_logging(settings.log_level)

    try:
        strategy = build_strategy(settings, args.strategy)
        invoker = None
        if args.generate_prompts:
            invoker = PromptPipelineInvoker(
                tool=settings.prompt_tool, script=settings.prompt_script)

        options = RunOptions(
            input_path=Path(args.input),
            output_dir=Path(args.output),
            slide_filename=args.slide_output,
            theme=args.theme or settings.default_theme,
            generate_prompts=args.generate_prompts,
            prompt_dir=Path(args.prompt_dir) if args.prompt_dir else None,
        )
        result = asyncio.run(generate_slides_for_file(
            options, strategy, invoker))
    except TextToSlideError as e:
        if args.debug:
            traceback.print_exc()
        raise SystemExit(f"[Text to Slide] Fatal error: {e}") from e

    print(result.slide_path)


if __name__ == "__main__":
    main()
