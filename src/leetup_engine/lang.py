"""Canonical language definitions — single source of truth.

All language key/extension/comment mappings live here, together with the
anchor rules used by the generator to place ``before_function_definition``
snippets and to resolve the ``$func`` placeholder. The generator never
special-cases a language; it asks the language's anchors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

from leetup_engine.errors import UnsupportedLanguage


class Anchors(Protocol):
    """Language-specific pattern matching over fetched stub code."""

    def find_definition_anchor(self, text: str) -> int | None:
        """Return the 0-based index of the line that opens the solution definition."""

    def extract_primary_name(self, text: str) -> str | None:
        """Return the name of the primary function/method in ``text``."""


@dataclass(frozen=True)
class RegexAnchors:
    """Anchors driven by two line-oriented regular expressions.

    ``definition`` must match the anchor line. ``name`` must capture the
    primary function name in group 1.
    """

    definition: re.Pattern | None = None
    name: re.Pattern | None = None

    def find_definition_anchor(self, text: str) -> int | None:
        if self.definition is None:
            return None
        for index, line in enumerate(text.split("\n")):
            if self.definition.search(line):
                return index
        return None

    def extract_primary_name(self, text: str) -> str | None:
        if self.name is None:
            return None
        # Helper types in stub comments come before the solution definition
        start = self.find_definition_anchor(text) or 0
        for line in text.split("\n")[start:]:
            match = self.name.search(line)
            if match:
                return match.group(1)
        return None


@dataclass(frozen=True)
class Language:
    """A supported target language."""

    name: str
    extension: str
    comment: str
    anchors: Anchors


_C_CLASS = re.compile(r"^\s*(?:public\s+)?class\s+Solution\b")
_C_METHOD = re.compile(
    r"^\s+(?:public\s+|static\s+|virtual\s+)*"
    r"[\w:<>\[\],]+(?:\s*<[^()]*>)?[\s\*&]+(\w+)\s*\("
)

LANGUAGES: dict[str, Language] = {
    "rust": Language(
        "rust", "rs", "//",
        RegexAnchors(re.compile(r"^\s*impl\s+Solution\b"), re.compile(r"^\s*pub\s+fn\s+(\w+)")),
    ),
    "java": Language("java", "java", "//", RegexAnchors(_C_CLASS, _C_METHOD)),
    "cpp": Language("cpp", "cpp", "//", RegexAnchors(_C_CLASS, _C_METHOD)),
    "javascript": Language(
        "javascript", "js", "//",
        RegexAnchors(
            re.compile(r"^\s*(?:(?:var|let|const)\s+\w+\s*=\s*function\b|function\s+\w+)"),
            re.compile(r"^\s*(?:(?:var|let|const)\s+|function\s+)(\w+)"),
        ),
    ),
    "typescript": Language(
        "typescript", "ts", "//",
        RegexAnchors(re.compile(r"^\s*function\s+\w+"), re.compile(r"^\s*function\s+(\w+)")),
    ),
    "golang": Language(
        "golang", "go", "//",
        RegexAnchors(
            re.compile(r"^func\s+"),
            re.compile(r"^func\s+(?:\([^)]*\)\s*)?(\w+)"),
        ),
    ),
    "python3": Language(
        "python3", "py", "#",
        RegexAnchors(re.compile(r"^\s*class\s+Solution\b"), re.compile(r"^\s*def\s+(\w+)\s*\(")),
    ),
    "mysql": Language("mysql", "sql", "--", RegexAnchors()),
}

# CLI/config aliases → canonical language keys
ALIASES: dict[str, str] = {
    "rs": "rust",
    "js": "javascript",
    "ts": "typescript",
    "go": "golang",
    "python": "python3",
    "py": "python3",
    "c++": "cpp",
    "sql": "mysql",
}


def normalize_lang(key: str) -> str:
    """Map an alias or canonical key to the canonical key; unknown keys pass through."""
    lowered = key.strip().lower()
    return ALIASES.get(lowered, lowered)


def get_language(key: str) -> Language:
    """Look up a language by canonical key or alias."""
    lang = LANGUAGES.get(normalize_lang(key))
    if lang is None:
        raise UnsupportedLanguage(
            f"Language not supported: {key}. Valid: {', '.join(LANGUAGES)}"
        )
    return lang
