"""Class-list classification and minimal rewriting of program text.

Every literal span is classified into one of three outcomes:

* :class:`NoChange` -- not a class list, or nothing to rename;
* :class:`FullRewrite` -- every token is looked up and the list re-joined;
* :class:`PartialRewrite` -- complete classes before a runtime-completed
  fragment (``fi fi-`` before ``${code}``) are renamed, the fragment is kept.

Only spans whose text actually changes produce an edit; quotes, comments and
all other code are copied from the original source.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from mimicss.edits import EditBuffer
from mimicss.model.usage import UsageIndex, is_partial_token, split_class_list
from mimicss.source.escapes import escape_string, escape_template
from mimicss.source.literals import LiteralSpan, StringLiteral, TemplateLiteral, iter_literals
from mimicss.source.parser import Program

__all__ = [
    "NoChange",
    "FullRewrite",
    "PartialRewrite",
    "Rewrite",
    "NO_CHANGE",
    "classify",
    "render",
    "rewrite_program",
    "scan_usage",
]

_LEADING_SPACE_RE = re.compile(r"^[\s\ufeff]")
_TRAILING_SPACE_RE = re.compile(r"[\s\ufeff]$")


@dataclass(frozen=True)
class NoChange:
    pass


@dataclass(frozen=True)
class FullRewrite:
    text: str


@dataclass(frozen=True)
class PartialRewrite:
    text: str
    suffix: str


Rewrite = Union[NoChange, FullRewrite, PartialRewrite]

NO_CHANGE = NoChange()


def _glued(value: str, joined: bool, edge_re: re.Pattern[str]) -> bool:
    """A joined edge is glued when no whitespace separates it from runtime text."""
    return joined and edge_re.search(value) is None


def _edge_pad(joined: bool, glued: bool, token: str, class_map: Mapping[str, str]) -> str:
    # A glued fragment of a runtime-built name must stay glued.
    if not joined or (glued and token not in class_map):
        return ""
    return " "


def classify(
    value: str,
    class_map: Mapping[str, str],
    join_left: bool = False,
    join_right: bool = False,
) -> Rewrite:
    """Decide how the class list *value* should be rewritten.

    A list qualifies when at least one token is a key of *class_map*; tokens
    that are not keys are kept as written. Whitespace collapses to single
    spaces, and each joined edge keeps exactly one separating space.
    """
    tokens = split_class_list(value)
    if not tokens:
        return NO_CHANGE

    glued_left = _glued(value, join_left, _LEADING_SPACE_RE)
    glued_right = _glued(value, join_right, _TRAILING_SPACE_RE)

    if glued_right and is_partial_token(tokens[-1]):
        suffix = tokens[-1]
        complete = tokens[:-1]
        if not complete or not all(token in class_map for token in complete):
            return NO_CHANGE
        lead = _edge_pad(join_left, glued_left, complete[0], class_map)
        renamed = " ".join(class_map[token] for token in complete)
        return PartialRewrite(text=f"{lead}{renamed} {suffix}", suffix=suffix)

    if not any(token in class_map for token in tokens):
        return NO_CHANGE
    lead = _edge_pad(join_left, glued_left, tokens[0], class_map)
    trail = _edge_pad(join_right, glued_right, tokens[-1], class_map)
    body = " ".join(class_map.get(token, token) for token in tokens)
    return FullRewrite(text=f"{lead}{body}{trail}")


def render(span: LiteralSpan, rewrite: Rewrite) -> str | None:
    """Return replacement source text for *span*, or None if nothing changes."""
    if isinstance(rewrite, NoChange) or rewrite.text == span.value:
        return None
    if span.raw:
        return rewrite.text
    if span.quote == "`":
        return escape_template(rewrite.text)
    return escape_string(rewrite.text, span.quote)


def _spans(literal: StringLiteral | TemplateLiteral) -> tuple[LiteralSpan, ...]:
    if isinstance(literal, StringLiteral):
        return (literal.span,)
    return literal.chunks


def rewrite_program(program: Program, class_map: Mapping[str, str]) -> str:
    """Rename class lists in *program* and return the new source text."""
    buffer = EditBuffer(program.source)
    for literal in iter_literals(program):
        if literal.protected:
            continue
        for span in _spans(literal):
            rewrite = classify(span.value, class_map, span.join_left, span.join_right)
            replacement = render(span, rewrite)
            if replacement is not None:
                buffer.replace(span.start, span.end, replacement.encode("utf-8"))
    return buffer.apply().decode("utf-8")


def scan_usage(program: Program, usage: UsageIndex) -> None:
    """Count class tokens and record dynamic prefixes found in *program*.

    A dynamic prefix is the last token of a span glued to runtime text on its
    right, when that token ends in ``-`` or ``:`` (``icon-`` in
    ``` `icon-${name}` ``` or ``"icon-" + name``).
    """
    for literal in iter_literals(program):
        for span in _spans(literal):
            usage.record_class_list(span.value)
            if _glued(span.value, span.join_right, _TRAILING_SPACE_RE):
                tokens = split_class_list(span.value)
                if tokens:
                    usage.record_prefix(tokens[-1])
