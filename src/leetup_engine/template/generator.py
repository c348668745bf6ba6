"""Solution file generator.

Takes a fetched problem stub plus the language's injection config and
produces the marker-annotated text of a new solution file. Output is a
pure function of the inputs: no timestamps, no environment lookups.
"""

from __future__ import annotations

import logging

from leetup_engine.config import InjectionConfig
from leetup_engine.errors import AnchorNotFound, MalformedDocument
from leetup_engine.lang import Anchors, get_language
from leetup_engine.models import ProblemStub
from leetup_engine.template import FUNC_PLACEHOLDER
from leetup_engine.template.document import (
    CODE,
    CUSTOM,
    INFO,
    INJECT_AFTER,
    INJECT_BEFORE,
    INJECT_BEFORE_EXCLUDE,
    Document,
    Segment,
)
from leetup_engine.template.parser import parse, serialize

logger = logging.getLogger(__name__)


def generate(
    stub: ProblemStub,
    cfg: InjectionConfig | None = None,
    include_definition: bool = True,
    comment_prefix: str | None = None,
    anchors: Anchors | None = None,
) -> str:
    """Generate the text of a solution file.

    Args:
        stub: Fetched problem stub.
        cfg: Injection config for ``stub.lang``; None means no injection.
        include_definition: Emit the problem statement as a custom region.
        comment_prefix: Override the language's line-comment prefix.
        anchors: Override the language's anchor rules.

    Raises:
        UnsupportedLanguage: ``stub.lang`` is unknown and no overrides given.
        AnchorNotFound: A configured insertion point or ``$func`` name
            could not be located in ``stub.code``.
        MalformedDocument: ``stub.code`` itself contains marker lines, so
            the output would not parse back to the document that was built.
    """
    if comment_prefix is None or anchors is None:
        lang = get_language(stub.lang)
        comment_prefix = comment_prefix or lang.comment
        anchors = anchors or lang.anchors

    doc = build_document(stub, cfg, include_definition, comment_prefix, anchors)
    text = serialize(doc, comment_prefix)

    # Marker lines inside stub code either break the parse or move region
    # boundaries; both must fail here rather than at extraction time.
    if parse(text, comment_prefix) != doc:
        raise MalformedDocument(
            f"generated file for {stub.slug} does not parse back to the same regions; "
            "the stub code contains marker lines"
        )
    return text


def build_document(
    stub: ProblemStub,
    cfg: InjectionConfig | None,
    include_definition: bool,
    comment_prefix: str,
    anchors: Anchors,
) -> Document:
    """Assemble the Document for a stub without serializing it."""
    cfg = cfg or InjectionConfig()
    segments = [
        Segment(INFO, fields={"id": str(stub.id), "lang": stub.lang, "slug": stub.slug}),
    ]

    if include_definition and stub.definition:
        segments.append(Segment(CUSTOM, comment_block(stub.definition, comment_prefix)))

    if cfg.before_code_exclude:
        segments.append(Segment(INJECT_BEFORE_EXCLUDE, "\n".join(cfg.before_code_exclude)))

    body = _body(stub.code, cfg, anchors)
    code = Segment(CODE, body)
    if cfg.before_code:
        code.children.append(Segment(INJECT_BEFORE, "\n".join(cfg.before_code)))
    if cfg.after_code:
        code.children.append(Segment(INJECT_AFTER, _after_code(cfg.after_code, body, anchors)))
    segments.append(code)

    logger.debug(
        "Built %s document for %s: %s",
        stub.lang, stub.slug, ", ".join(s.kind for s in segments),
    )
    return Document(segments)


def comment_block(text: str, comment_prefix: str) -> str:
    """Prefix every line of ``text`` with the comment prefix."""
    return "\n".join(
        f"{comment_prefix} {line}" if line.strip() else comment_prefix
        for line in text.rstrip("\n").split("\n")
    )


def _body(code: str, cfg: InjectionConfig, anchors: Anchors) -> str:
    if not cfg.before_function_definition:
        return code
    index = anchors.find_definition_anchor(code)
    if index is None:
        raise AnchorNotFound(
            "before_function_definition is configured but no definition anchor "
            "line was found in the stub code"
        )
    logger.debug("Definition anchor at line %d", index + 1)
    lines = code.split("\n")
    lines[index:index] = cfg.before_function_definition.split("\n")
    return "\n".join(lines)


def _after_code(template: str, code: str, anchors: Anchors) -> str:
    if FUNC_PLACEHOLDER not in template:
        return template
    name = anchors.extract_primary_name(code)
    if not name:
        raise AnchorNotFound(
            f"after_code uses {FUNC_PLACEHOLDER} but no function name was found in the code body"
        )
    logger.debug("Resolved %s to %s", FUNC_PLACEHOLDER, name)
    return template.replace(FUNC_PLACEHOLDER, name)
