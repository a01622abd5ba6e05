"""Position-preserving edit buffer.

Edits are recorded as (start, end, replacement) against an immutable original
and spliced in a single pass, so untouched text is copied verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Edit", "EditBuffer"]

T = TypeVar("T", str, bytes)


@dataclass(frozen=True)
class Edit(Generic[T]):
    """Replace ``original[start:end]`` with ``replacement``."""

    start: int
    end: int
    replacement: T


class EditBuffer(Generic[T]):
    """Collect non-overlapping edits against *original* and apply them together.

    Works on ``str`` (character offsets) or ``bytes`` (byte offsets).
    """

    def __init__(self, original: T) -> None:
        self._original = original
        self._edits: list[Edit[T]] = []

    def replace(self, start: int, end: int, replacement: T) -> None:
        if not 0 <= start <= end <= len(self._original):
            raise ValueError(
                f"Edit range {start}:{end} outside text of length {len(self._original)}"
            )
        self._edits.append(Edit(start, end, replacement))

    def __len__(self) -> int:
        return len(self._edits)

    def apply(self) -> T:
        """Return the original text with every edit spliced in."""
        if not self._edits:
            return self._original
        parts: list[T] = []
        cursor = 0
        for edit in sorted(self._edits, key=lambda e: (e.start, e.end)):
            if edit.start < cursor:
                raise ValueError(f"Overlapping edit at {edit.start}:{edit.end}")
            parts.append(self._original[cursor:edit.start])
            parts.append(edit.replacement)
            cursor = edit.end
        parts.append(self._original[cursor:])
        return self._original[:0].join(parts)
