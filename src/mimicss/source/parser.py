"""Program text parsing with tree-sitter's JavaScript grammar (JSX included)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser, Tree

from mimicss.errors import ParseError

__all__ = ["Program", "parse_program"]


@lru_cache(maxsize=1)
def _language() -> Language:
    return Language(tree_sitter_javascript.language())


@dataclass(frozen=True)
class Program:
    """A parsed program: its UTF-8 source and syntax tree.

    Node offsets (``start_byte``/``end_byte``) index into ``source``.
    """

    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")


def _first_error(node: Node) -> Node:
    """Descend to the first ERROR or MISSING node below *node*."""
    current = node
    while True:
        for child in current.children:
            if child.type == "ERROR" or child.is_missing:
                return child
            if child.has_error:
                current = child
                break
        else:
            return current


def parse_program(text: str) -> Program:
    """Parse JavaScript/JSX *text*.

    tree-sitter recovers from syntax errors; any recovered error is reported
    as a :class:`ParseError` so callers never rewrite a misread program.
    """
    source = text.encode("utf-8")
    tree = Parser(_language()).parse(source)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root)
        row, column = bad.start_point
        what = "missing " + bad.type if bad.is_missing else "unexpected input"
        raise ParseError(what, "program", row + 1, column + 1)
    return Program(source=source, tree=tree)
