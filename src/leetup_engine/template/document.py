"""Document model for marker-annotated solution files."""

from __future__ import annotations

from dataclasses import dataclass, field

from leetup_engine.template import (
    TAG_AFTER_CODE,
    TAG_BEFORE_CODE,
    TAG_BEFORE_CODE_EXCLUDE,
    TAG_CODE,
    TAG_CUSTOM,
    TAG_INFO,
)

# Segment kinds, in canonical document order
INFO = "info"
CUSTOM = "custom"
INJECT_BEFORE_EXCLUDE = "inject_before_exclude"
CODE = "code"
INJECT_BEFORE = "inject_before"
INJECT_AFTER = "inject_after"

KIND_TO_TAG = {
    INFO: TAG_INFO,
    CUSTOM: TAG_CUSTOM,
    INJECT_BEFORE_EXCLUDE: TAG_BEFORE_CODE_EXCLUDE,
    CODE: TAG_CODE,
    INJECT_BEFORE: TAG_BEFORE_CODE,
    INJECT_AFTER: TAG_AFTER_CODE,
}
TAG_TO_KIND = {tag: kind for kind, tag in KIND_TO_TAG.items()}

_TOP_LEVEL_ORDER = (INFO, CUSTOM, INJECT_BEFORE_EXCLUDE, INJECT_BEFORE, CODE, INJECT_AFTER)


@dataclass
class Segment:
    """One typed unit of a document.

    ``content`` is verbatim text, never reinterpreted. For a CODE segment
    it is the submittable body only; injected sub-regions live in
    ``children``. ``fields`` is used by INFO only.
    """

    kind: str
    content: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    children: list[Segment] = field(default_factory=list)

    @property
    def tag(self) -> str:
        return KIND_TO_TAG[self.kind]

    def child(self, kind: str) -> Segment | None:
        for c in self.children:
            if c.kind == kind:
                return c
        return None


@dataclass
class Document:
    """Ordered segments of one physical file."""

    segments: list[Segment] = field(default_factory=list)

    def find(self, kind: str) -> Segment | None:
        for seg in self.segments:
            if seg.kind == kind:
                return seg
        return None

    def find_all(self, kind: str) -> list[Segment]:
        return [seg for seg in self.segments if seg.kind == kind]

    @property
    def info(self) -> Segment | None:
        return self.find(INFO)

    @property
    def code(self) -> Segment | None:
        return self.find(CODE)

    def canonical(self) -> list[Segment]:
        """Segments in canonical order; stable within the same kind."""
        rank = {kind: i for i, kind in enumerate(_TOP_LEVEL_ORDER)}
        return sorted(self.segments, key=lambda s: rank[s.kind])
