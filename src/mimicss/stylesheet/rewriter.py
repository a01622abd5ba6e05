"""Stylesheet rewriting: substitute class components, copy everything else."""

from __future__ import annotations

from typing import Callable

from mimicss.edits import EditBuffer
from mimicss.stylesheet.parser import parse_stylesheet
from mimicss.stylesheet.selectors import iter_class_components

__all__ = ["collect_classes", "rename_classes"]


def collect_classes(source: str) -> list[str]:
    """Return the class name of every class component in *source*.

    Repeated components appear once per occurrence, in source order.
    """
    return [component.value for component in iter_class_components(parse_stylesheet(source))]


def rename_classes(source: str, rename: Callable[[str], str | None]) -> str:
    """Rewrite class components of *source* using *rename*.

    *rename* returns the new name, or None to leave the component as written.
    Only the identifier after each ``.`` is touched; tag names, combinators,
    pseudo-classes, at-rule preludes, declarations and comments are copied
    byte-for-byte.
    """
    buffer = EditBuffer(source)
    for component in iter_class_components(parse_stylesheet(source)):
        renamed = rename(component.value)
        if renamed is not None and renamed != component.value:
            buffer.replace(component.start, component.end, renamed)
    return buffer.apply()
