"""Marker grammar, parser and serializer.

A marker line is ``<comment_prefix> @leetup=<tag>`` for regions, or
``<comment_prefix> @leetup=info key=value ...`` for the metadata line.
A region is two identical marker lines with its content in between;
regions nest. Parsing keeps a stack of open region tags: a marker whose
tag is on top of the stack closes it, a tag not on the stack opens a
new region, and a tag open deeper in the stack is a crossing violation.

Content is kept byte-exact, except that one blank line directly next to
each bracketing marker is dropped. The serializer always pads with one
blank line on each side, so serialize → parse restores every segment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from leetup_engine.errors import MalformedDocument, MultipleCodeRegions
from leetup_engine.template import MARKER_PREFIX, REGION_TAGS, TAG_CODE, TAG_INFO
from leetup_engine.template.document import (
    CODE,
    INFO,
    INJECT_AFTER,
    INJECT_BEFORE,
    TAG_TO_KIND,
    Document,
    Segment,
)

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    tag: str
    start: int
    spans: list[tuple[Segment, int, int]] = field(default_factory=list)


def detect_comment_prefix(text: str) -> str | None:
    """Return the comment prefix used by the first marker line in ``text``."""
    needle = " " + MARKER_PREFIX
    for line in text.split("\n"):
        stripped = line.strip()
        idx = stripped.find(needle)
        if idx <= 0:
            continue
        rest = stripped[idx + len(needle):].split()
        if rest and (rest[0] in REGION_TAGS or rest[0] == TAG_INFO):
            return stripped[:idx]
    return None


def classify_line(line: str, comment_prefix: str) -> tuple[str, str] | None:
    """Classify a marker line.

    Returns:
        ``("info", "<fields>")`` for the metadata line, ``("region", tag)``
        for a region marker, None for any other line.
    """
    head = f"{comment_prefix} {MARKER_PREFIX}"
    stripped = line.strip()
    if not stripped.startswith(head):
        return None
    rest = stripped[len(head):]
    if rest in REGION_TAGS:
        return "region", rest
    if rest == TAG_INFO or rest.startswith(TAG_INFO + " "):
        return TAG_INFO, rest[len(TAG_INFO):].strip()
    return None


def parse(text: str, comment_prefix: str | None = None) -> Document:
    """Parse marker-annotated text into a Document.

    Args:
        text: File contents.
        comment_prefix: Line-comment prefix of the file's language. Detected
            from the first marker line when omitted.

    Raises:
        MalformedDocument: Unterminated or crossing regions, a duplicate or
            misplaced info line.
        MultipleCodeRegions: More than one top-level code region.
    """
    if comment_prefix is None:
        comment_prefix = detect_comment_prefix(text)
        if comment_prefix is None:
            return Document()

    lines = text.split("\n")
    stack: list[_Frame] = []
    root: list[Segment] = []
    info_seen = False
    region_seen = False
    code_start: int | None = None

    for i, line in enumerate(lines):
        marker = classify_line(line, comment_prefix)
        if marker is None:
            continue
        kind, value = marker

        if kind == TAG_INFO:
            if info_seen:
                raise MalformedDocument("duplicate info line", i + 1)
            if region_seen:
                raise MalformedDocument("info line must precede all region markers", i + 1)
            info_seen = True
            root.append(Segment(INFO, fields=_parse_fields(value, i + 1)))
            continue

        region_seen = True
        tag = value
        if stack and stack[-1].tag == tag:
            frame = stack.pop()
            seg = _build_segment(frame, lines, i)
            if stack:
                stack[-1].spans.append((seg, frame.start, i))
            else:
                if tag == TAG_CODE:
                    if code_start is not None:
                        raise MultipleCodeRegions(
                            f"second code region (first opened at line {code_start + 1})",
                            frame.start + 1,
                        )
                    code_start = frame.start
                root.append(seg)
        elif any(f.tag == tag for f in stack):
            raise MalformedDocument(
                f"region '{tag}' closed while '{stack[-1].tag}' is still open", i + 1,
            )
        else:
            stack.append(_Frame(tag, i))

    if stack:
        frame = stack[-1]
        raise MalformedDocument(f"unterminated region '{frame.tag}'", frame.start + 1)

    logger.debug("Parsed %d segment(s) with comment prefix %r", len(root), comment_prefix)
    return Document(root)


def serialize(doc: Document, comment_prefix: str) -> str:
    """Serialize a Document in canonical order. Inverse of :func:`parse`."""
    blocks = ["\n".join(_segment_lines(seg, comment_prefix)) for seg in doc.canonical()]
    return "\n\n".join(blocks) + "\n"


def marker_line(tag: str, comment_prefix: str) -> str:
    return f"{comment_prefix} {MARKER_PREFIX}{tag}"


def _segment_lines(seg: Segment, comment_prefix: str) -> list[str]:
    if seg.kind == INFO:
        fields = " ".join(f"{k}={v}" for k, v in seg.fields.items())
        return [f"{marker_line(TAG_INFO, comment_prefix)} {fields}".rstrip()]

    marker = marker_line(seg.tag, comment_prefix)
    if seg.kind != CODE:
        return [marker, "", *seg.content.split("\n"), "", marker]

    inner: list[str] = []
    before = seg.child(INJECT_BEFORE)
    after = seg.child(INJECT_AFTER)
    if before is not None:
        inner += _segment_lines(before, comment_prefix) + [""]
    inner += seg.content.split("\n")
    if after is not None:
        inner += [""] + _segment_lines(after, comment_prefix)
    return [marker, "", *inner, "", marker]


def _build_segment(frame: _Frame, lines: list[str], end: int) -> Segment:
    kind = TAG_TO_KIND[frame.tag]
    children = [seg for seg, _, _ in frame.spans]
    if kind != CODE:
        return Segment(kind, _trim(lines[frame.start + 1:end]), children=children)

    # The body lies between the last inject:before_code pair and the
    # first inject:after_code pair of this code region.
    body_start, body_end = frame.start + 1, end
    for seg, open_idx, close_idx in frame.spans:
        if seg.kind == INJECT_BEFORE:
            body_start = max(body_start, close_idx + 1)
        elif seg.kind == INJECT_AFTER:
            body_end = min(body_end, open_idx)
    if body_start > body_end:
        raise MalformedDocument(
            "inject:after_code region precedes inject:before_code region", body_end + 1,
        )
    return Segment(CODE, _trim(lines[body_start:body_end]), children=children)


def _trim(block: list[str]) -> str:
    block = list(block)
    if block and block[0] in ("", "\r"):
        block.pop(0)
    if block and block[-1] in ("", "\r"):
        block.pop()
    return "\n".join(block)


def _parse_fields(raw: str, line_no: int) -> dict[str, str]:
    fields: dict[str, str] = {}
    for token in raw.split():
        key, sep, value = token.partition("=")
        if not sep or not key:
            raise MalformedDocument(f"info field '{token}' is not key=value", line_no)
        fields[key] = value
    return fields
