"""Error taxonomy for template parsing, generation, extraction and hooks."""

from __future__ import annotations


class LeetupError(Exception):
    """Base class for all leetup-engine errors."""


class MalformedDocument(LeetupError, ValueError):
    """Marker structure violation: unterminated, crossing or duplicated regions."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MultipleCodeRegions(MalformedDocument):
    """More than one top-level ``code`` region; refusing to pick one."""


class MissingCodeMarkers(MalformedDocument):
    """No ``code`` region present in the document."""


class AnchorNotFound(LeetupError, ValueError):
    """A configured insertion point could not be located in fetched code."""


class ConfigInvalid(LeetupError, ValueError):
    """Malformed injection or hook configuration."""


class UnsupportedLanguage(LeetupError, ValueError):
    """Language key has no entry in the language table."""


class ProblemNotCached(LeetupError, KeyError):
    """Requested problem stub is not in the local cache."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "problem not cached"


class HookFailed(LeetupError, RuntimeError):
    """A hook command exited non-zero; remaining commands were skipped."""

    def __init__(self, command: str, exit_code: int, stderr: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(f"Hook failed with exit code {exit_code}: {command}{detail}")
