"""ClassMap: the run-scoped table from original to rewritten class tokens."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

__all__ = ["ClassMap"]


class ClassMap(Mapping[str, str]):
    """Original -> rewritten class token table.

    Entries are added once during extraction. Identity entries mark excluded
    tokens; every other value is unique among the renamed entries.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._renamed_values: set[str] = set()

    def assign(self, original: str, renamed: str) -> None:
        if original in self._entries:
            raise KeyError(f"Class {original!r} is already mapped to {self._entries[original]!r}")
        if original != renamed:
            if renamed in self._renamed_values:
                raise ValueError(f"Name {renamed!r} was already allocated")
            self._renamed_values.add(renamed)
        self._entries[original] = renamed

    def is_renamed(self, token: str) -> bool:
        """Return True if *token* is mapped to a name other than itself."""
        renamed = self._entries.get(token)
        return renamed is not None and renamed != token

    def rename(self, token: str) -> str:
        """Return the mapped name for *token*, or *token* itself if unmapped."""
        return self._entries.get(token, token)

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._renamed_values.clear()

    # --- Mapping protocol -------------------------------------------------

    def __getitem__(self, token: str) -> str:
        return self._entries[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ClassMap({self._entries!r})"
