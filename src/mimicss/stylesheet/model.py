"""Stylesheet model: prelude segments, rules, at-rules and declarations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

__all__ = [
    "PreludeSegment",
    "Declaration",
    "StyleRule",
    "AtRule",
    "Statement",
    "Stylesheet",
    "OPAQUE_AT_RULES",
]

# At-rules whose blocks hold keyframe selectors or descriptors, never selectors.
OPAQUE_AT_RULES = frozenset({
    "keyframes",
    "-webkit-keyframes",
    "-moz-keyframes",
    "-o-keyframes",
    "font-face",
    "page",
    "property",
    "counter-style",
    "font-feature-values",
    "font-palette-values",
})


@dataclass(frozen=True)
class PreludeSegment:
    """A run of prelude text and its offset in the stylesheet source."""

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class Declaration:
    """A ``name: value`` entry (or anything else ended by a semicolon)."""

    prelude: tuple[PreludeSegment, ...]


@dataclass(frozen=True)
class StyleRule:
    """A qualified rule: selector prelude followed by a block."""

    prelude: tuple[PreludeSegment, ...]
    children: tuple[Statement, ...]


@dataclass(frozen=True)
class AtRule:
    """An at-rule; ``children`` is None for statement at-rules like ``@import``."""

    name: str
    prelude: tuple[PreludeSegment, ...]
    children: tuple[Statement, ...] | None

    @property
    def is_opaque(self) -> bool:
        return self.name.lower() in OPAQUE_AT_RULES


Statement = Union[StyleRule, AtRule, Declaration]


@dataclass(frozen=True)
class Stylesheet:
    """Top-level statements of a parsed stylesheet, in source order."""

    statements: tuple[Statement, ...]

    def style_rules(self) -> Iterator[StyleRule]:
        """Yield every style rule, including nested ones, in source order.

        Rules inside opaque at-rules (``@keyframes`` and friends) are skipped.
        """
        stack: list[Statement] = list(reversed(self.statements))
        while stack:
            statement = stack.pop()
            if isinstance(statement, StyleRule):
                yield statement
                stack.extend(reversed(statement.children))
            elif isinstance(statement, AtRule):
                if statement.children is not None and not statement.is_opaque:
                    stack.extend(reversed(statement.children))
