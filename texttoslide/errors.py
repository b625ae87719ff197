"""Exceptions raised by the text-to-slide pipeline."""

from __future__ import annotations


class TextToSlideError(Exception):
    """Base class for every failure the pipeline reports to the operator."""


class ConfigError(TextToSlideError, ValueError):
    """Raised when arguments, credentials or the input itself make a run impossible."""

    def __init__(self, issues: list[str] | str):
        if isinstance(issues, str):
            issues = [issues]
        self.issues = [str(i).strip() for i in issues if str(i).strip()]
        if not self.issues:
            self.issues = ["Invalid configuration"]
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.issues) == 1:
            return self.issues[0]
        lines = ["Configuration is invalid:"]
        for issue in self.issues:
            lines.append(f"- {issue}")
        return "\n".join(lines)


class ReadError(TextToSlideError):
    """Raised when the input document cannot be read."""


class NotFoundError(ReadError):
    """Raised when the input path does not name an existing regular file."""


class GenerationError(TextToSlideError):
    """Raised when a strategy cannot produce a deck."""


class WriteError(TextToSlideError):
    """Raised when the deck cannot be persisted."""


class DownstreamError(TextToSlideError):
    """Describes a failed prompt-derivation run; reported, never raised by the pipeline."""
