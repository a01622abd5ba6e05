"""Class component scanning for selector text.

Selectors are scanned, not fully parsed: strings and attribute selectors are
skipped whole, and every ``.ident`` outside them is a class component. Pseudo
class arguments (``:not(.a, .b)``), combinators and nesting selectors need no
special handling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from mimicss.stylesheet.model import PreludeSegment, StyleRule, Stylesheet

__all__ = ["ClassComponent", "find_class_components", "iter_class_components", "unescape_ident"]

_ESCAPE = r"\\(?:[0-9a-fA-F]{1,6}[ \t\n\r\f]?|[^\n\r\f0-9a-fA-F])"

_SELECTOR_RE = re.compile(
    rf"""
    (?P<string>"(?:\\[\s\S]|[^"\\])*"|'(?:\\[\s\S]|[^'\\])*')     # quoted string
    | (?P<attribute>\[(?:"(?:\\[\s\S]|[^"\\])*"                   # [attr="value"]
                        |'(?:\\[\s\S]|[^'\\])*'
                        |\\[\s\S]
                        |[^\]"'\\])*\])
    | \.(?P<class>-{{0,2}}(?:[A-Za-z_]|[^\x00-\x7f]|{_ESCAPE})    # .class-name
                 (?:[\w-]|[^\x00-\x7f]|{_ESCAPE})*)
    | (?P<escape>{_ESCAPE})                                        # escaped char elsewhere
    """,
    re.VERBOSE,
)

_UNESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n\r\f]?|([\s\S]))")


@dataclass(frozen=True)
class ClassComponent:
    """A class selector component.

    ``value`` is the unescaped class name; ``start``/``end`` bound the raw
    identifier (without the leading dot) in the stylesheet source.
    """

    value: str
    start: int
    end: int


def unescape_ident(raw: str) -> str:
    """Resolve CSS escapes: ``sm\\:flex`` -> ``sm:flex``, ``\\31 0`` -> ``10``."""
    if "\\" not in raw:
        return raw

    def _replace(match: re.Match[str]) -> str:
        hex_digits, char = match.groups()
        if hex_digits is None:
            return char
        code = int(hex_digits, 16)
        if code == 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            return "\ufffd"
        return chr(code)

    return _UNESCAPE_RE.sub(_replace, raw)


def find_class_components(segment: PreludeSegment) -> list[ClassComponent]:
    """Return the class components of one prelude segment, in order."""
    components: list[ClassComponent] = []
    for match in _SELECTOR_RE.finditer(segment.text):
        raw = match.group("class")
        if raw is None:
            continue
        start = segment.start + match.start("class")
        components.append(ClassComponent(unescape_ident(raw), start, start + len(raw)))
    return components


def _rule_components(rule: StyleRule) -> Iterator[ClassComponent]:
    for segment in rule.prelude:
        yield from find_class_components(segment)


def iter_class_components(stylesheet: Stylesheet) -> Iterator[ClassComponent]:
    """Yield every class component of every style rule, in source order."""
    for rule in stylesheet.style_rules():
        yield from _rule_components(rule)
