"""Lark-based parser turning stylesheet source into a Stylesheet model."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from mimicss.errors import ParseError
from mimicss.stylesheet.model import (
    AtRule,
    Declaration,
    PreludeSegment,
    Statement,
    StyleRule,
    Stylesheet,
)

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


class _Block:
    """Marker wrapping the statements of a ``{ ... }`` block."""

    def __init__(self, statements: list[Statement]):
        self.statements = tuple(statements)


class _StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into stylesheet model objects."""

    def prelude(self, items: list[Token]) -> tuple[PreludeSegment, ...]:
        return tuple(PreludeSegment(text=str(tok), start=tok.start_pos) for tok in items)

    def declaration(self, items: list[object]) -> Declaration:
        return Declaration(prelude=items[0])  # type: ignore[arg-type]

    def declaration_tail(self, items: list[object]) -> Declaration:
        return self.declaration(items)

    def block(self, items: list[Statement]) -> _Block:
        return _Block(items)

    def rule(self, items: list[object]) -> StyleRule:
        prelude, block = items
        return StyleRule(prelude=prelude, children=block.statements)  # type: ignore[arg-type, union-attr]

    def at_rule(self, items: list[object]) -> AtRule:
        # Items are: AT_KEYWORD, optional prelude, optional block
        name = str(items[0])[1:]
        prelude: tuple[PreludeSegment, ...] = ()
        children: tuple[Statement, ...] | None = None
        for item in items[1:]:
            if isinstance(item, _Block):
                children = item.statements
            else:
                prelude = item  # type: ignore[assignment]
        return AtRule(name=name, prelude=prelude, children=children)

    def at_rule_tail(self, items: list[object]) -> AtRule:
        return self.at_rule(items)

    def start(self, items: list[Statement]) -> Stylesheet:
        return Stylesheet(statements=tuple(items))


def _position(exc: Exception, attr: str) -> int | None:
    value = getattr(exc, attr, None)
    if isinstance(value, int) and value > 0:
        return value
    return None


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet *source* into a :class:`Stylesheet`.

    Raises :class:`ParseError` when the source is not structurally valid
    (unbalanced braces, unterminated strings or comments).
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as exc:
        lines = str(exc).strip().splitlines()
        message = lines[0] if lines else "unexpected input"
        raise ParseError(
            message, "stylesheet", _position(exc, "line"), _position(exc, "column")
        ) from exc
    return _StylesheetTransformer().transform(tree)
