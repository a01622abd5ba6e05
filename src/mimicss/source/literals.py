"""Literal discovery: string and template literals with their surrounding context.

Each literal is reported as a tagged variant (:class:`StringLiteral` or
:class:`TemplateLiteral`) carrying one :class:`LiteralSpan` per stretch of
literal text. A span records whether its edges are *joined*, i.e. whether
runtime text is glued onto that side by ``+`` concatenation or by a template
interpolation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from tree_sitter import Node

from mimicss.source.escapes import cook
from mimicss.source.parser import Program

__all__ = ["LiteralSpan", "StringLiteral", "TemplateLiteral", "Literal", "iter_literals"]

# Upper bound on parent links followed when inspecting a literal's context.
MAX_ANCESTOR_DEPTH = 64

_STYLE_KEY = "style"


@dataclass(frozen=True)
class LiteralSpan:
    """One stretch of literal text.

    Attributes:
        start: Byte offset of the first text byte (after the opening delimiter).
        end: Byte offset just past the last text byte.
        value: The cooked runtime text.
        quote: The delimiter: ``"``, ``'`` or a back-tick.
        join_left: Runtime text is glued onto the start of this span.
        join_right: Runtime text is glued onto the end of this span.
        raw: True for JSX attribute strings, which have no escape sequences.
    """

    start: int
    end: int
    value: str
    quote: str
    join_left: bool = False
    join_right: bool = False
    raw: bool = False


@dataclass(frozen=True)
class StringLiteral:
    span: LiteralSpan
    protected: bool


@dataclass(frozen=True)
class TemplateLiteral:
    chunks: tuple[LiteralSpan, ...]
    protected: bool
    tagged: bool


Literal = Union[StringLiteral, TemplateLiteral]


def _same(a: Node | None, b: Node) -> bool:
    return (
        a is not None
        and a.start_byte == b.start_byte
        and a.end_byte == b.end_byte
        and a.type == b.type
    )


def _unwrap_parent(node: Node) -> tuple[Node | None, Node]:
    """Return (parent, child) skipping parenthesized_expression wrappers."""
    child = node
    parent = node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        child = parent
        parent = parent.parent
    return parent, child


def _concat_side(node: Node) -> tuple[Node | None, str | None]:
    """Return the ``+`` expression *node* is an operand of, and which side."""
    parent, child = _unwrap_parent(node)
    if parent is None:
        return None, None
    if parent.type == "binary_expression":
        operator = parent.child_by_field_name("operator")
        if operator is None or operator.type != "+":
            return None, None
    elif parent.type == "augmented_assignment_expression":
        operator = parent.child_by_field_name("operator")
        if operator is None or operator.type != "+=":
            return None, None
    else:
        return None, None
    if _same(parent.child_by_field_name("left"), child):
        return parent, "left"
    if _same(parent.child_by_field_name("right"), child):
        return parent, "right"
    return None, None


def concat_edges(node: Node) -> tuple[bool, bool]:
    """Return (join_left, join_right) for an operand of a ``+`` chain.

    In ``a + "x" + b`` the literal is glued to ``a`` on its left and to ``b``
    on its right, even though ``b`` belongs to the outer expression.
    """
    join_left = join_right = False
    leftmost = rightmost = True
    current = node
    for _ in range(MAX_ANCESTOR_DEPTH):
        if not (leftmost or rightmost):
            break
        parent, side = _concat_side(current)
        if parent is None:
            break
        if side == "right":
            join_left = join_left or leftmost
            leftmost = False
        else:
            join_right = join_right or rightmost
            rightmost = False
        current = parent
    return join_left, join_right


def _key_name(program: Program, key: Node | None) -> str | None:
    if key is None:
        return None
    if key.type in ("property_identifier", "identifier"):
        return program.text(key.start_byte, key.end_byte)
    if key.type == "string":
        return program.text(key.start_byte + 1, key.end_byte - 1)
    return None


def in_style_value(program: Program, node: Node) -> bool:
    """Return True if *node* sits inside the value of a ``style`` property.

    Covers object properties (``{ style: {...} }``) and JSX ``style``
    attributes. The walk stops after MAX_ANCESTOR_DEPTH parent links.
    """
    child = node
    parent = node.parent
    for _ in range(MAX_ANCESTOR_DEPTH):
        if parent is None:
            return False
        if parent.type == "pair":
            if _same(parent.child_by_field_name("value"), child) and (
                _key_name(program, parent.child_by_field_name("key")) == _STYLE_KEY
            ):
                return True
        elif parent.type == "jsx_attribute":
            name = parent.named_children[0] if parent.named_child_count else None
            if _key_name(program, name) == _STYLE_KEY:
                return True
        child = parent
        parent = parent.parent
    return False


def _is_module_specifier(node: Node) -> bool:
    parent = node.parent
    if parent is None:
        return False
    if parent.type in ("import_statement", "export_statement"):
        return True
    if parent.type == "arguments" and parent.parent is not None:
        call = parent.parent
        function = call.child_by_field_name("function")
        return call.type == "call_expression" and function is not None and function.type == "import"
    return False


def _is_protected_string(program: Program, node: Node) -> bool:
    parent = node.parent
    # Directive-like statements ("use strict", "use client") have no class-list role.
    if parent is not None and parent.type == "expression_statement":
        return True
    return _is_module_specifier(node) or in_style_value(program, node)


def _is_tagged(node: Node) -> bool:
    parent = node.parent
    return (
        parent is not None
        and parent.type == "call_expression"
        and _same(parent.child_by_field_name("arguments"), node)
    )


def _string_literal(program: Program, node: Node) -> StringLiteral:
    start, end = node.start_byte + 1, node.end_byte - 1
    raw_text = program.text(start, end)
    parent = node.parent
    is_jsx = parent is not None and parent.type == "jsx_attribute"
    join_left, join_right = concat_edges(node)
    span = LiteralSpan(
        start=start,
        end=end,
        value=raw_text if is_jsx else cook(raw_text),
        quote=program.text(node.start_byte, node.start_byte + 1),
        join_left=join_left,
        join_right=join_right,
        raw=is_jsx,
    )
    return StringLiteral(span=span, protected=_is_protected_string(program, node))


def _template_literal(program: Program, node: Node) -> TemplateLiteral:
    outer_left, outer_right = concat_edges(node)
    bounds: list[tuple[int, int]] = []
    position = node.start_byte + 1
    for child in node.children:
        if child.type == "template_substitution":
            bounds.append((position, child.start_byte))
            position = child.end_byte
    bounds.append((position, node.end_byte - 1))

    last = len(bounds) - 1
    chunks = tuple(
        LiteralSpan(
            start=start,
            end=end,
            value=cook(program.text(start, end)),
            quote="`",
            join_left=index > 0 or outer_left,
            join_right=index < last or outer_right,
        )
        for index, (start, end) in enumerate(bounds)
    )
    tagged = _is_tagged(node)
    return TemplateLiteral(
        chunks=chunks,
        protected=tagged or in_style_value(program, node),
        tagged=tagged,
    )


def iter_literals(program: Program) -> Iterator[Literal]:
    """Yield every string and template literal of *program* in source order.

    Literals nested in template interpolations are yielded after the template
    that contains them.
    """
    stack: list[Node] = [program.root]
    while stack:
        node = stack.pop()
        if node.type == "string":
            yield _string_literal(program, node)
            continue
        if node.type == "template_string":
            yield _template_literal(program, node)
        stack.extend(reversed(node.children))
