from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from texttoslide.errors import DownstreamError

# Relative prompt scripts resolve from the project root, not the working directory.
PROJECT_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True)
class DownstreamResult:
    prompt_dir: Path | None = None
    output: str = ""
    error: DownstreamError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _failed(reason: str) -> DownstreamResult:
    return DownstreamResult(error=DownstreamError(reason))


class PromptPipelineInvoker:
    """Runs the external prompt-derivation tool on a written deck.

    Every failure is returned as a DownstreamResult instead of raised; the
    deck is already on disk when this runs.
    """

    def __init__(
        self,
        tool: str = "node",
        script: str | None = "scripts/marp_to_prompts.js",
        base_dir: str | Path = PROJECT_ROOT,
    ) -> None:
        self.tool = tool
        self.script = script
        self.base_dir = Path(base_dir)

    def _command(self, deck_path: Path) -> list[str] | DownstreamResult:
        executable = shutil.which(self.tool)
        if executable is None:
            return _failed(f"{self.tool} not found on PATH")

        command = [executable]
        if self.script:
            script_path = Path(self.script).expanduser()
            if not script_path.is_absolute():
                script_path = self.base_dir / script_path
            script_path = script_path.resolve()
            if not script_path.is_file():
                return _failed(f"prompt script not found at {script_path}")
            command.append(str(script_path))
        command.append(str(deck_path))
        return command

    def invoke(self, deck_path: str | Path, prompt_dir: str | Path) -> DownstreamResult:
        command = self._command(Path(deck_path))
        if isinstance(command, DownstreamResult):
            return command

        logger.info("Generating image prompts from slides...")
        env = {**os.environ, "PROMPT_OUTPUT_DIR": str(prompt_dir)}
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                env=env,
            )
        except subprocess.CalledProcessError as e:
            reason = f"prompt tool exited with status {e.returncode}"
            detail = (e.stderr or "").strip()
            if detail:
                reason = f"{reason}: {detail}"
            return _failed(reason)
        except OSError as e:
            return _failed(f"could not start prompt tool: {e}")

        if completed.stdout.strip():
            logger.info("Prompt generation output:\n{}",
                        completed.stdout.rstrip())
        return DownstreamResult(prompt_dir=Path(prompt_dir), output=completed.stdout)
