"""Extract the submittable code from a (possibly edited) solution file."""

from __future__ import annotations

from pathlib import Path

from leetup_engine.errors import MissingCodeMarkers
from leetup_engine.template.document import CODE
from leetup_engine.template.parser import parse


def extract(text: str, comment_prefix: str | None = None) -> str:
    """Return the body of the single top-level code region.

    Injected before/after sub-regions are excluded; everything else
    between the code markers is returned verbatim.

    Raises:
        MissingCodeMarkers: No code region in ``text``.
        MultipleCodeRegions: More than one top-level code region.
        MalformedDocument: Any other marker structure violation.
    """
    doc = parse(text, comment_prefix)
    code = doc.find(CODE)
    if code is None:
        raise MissingCodeMarkers("no '@leetup=code' region found")
    return code.content


def extract_file(path: Path | str, comment_prefix: str | None = None) -> str:
    """Read a solution file and extract its submittable code."""
    return extract(Path(path).read_text(encoding="utf-8"), comment_prefix)
