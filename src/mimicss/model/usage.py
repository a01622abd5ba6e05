"""Usage index: class token occurrence counts and dynamic prefixes seen in programs."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field

__all__ = ["UsageIndex", "split_class_list", "is_partial_token", "PARTIAL_SUFFIXES"]

# JS ``\s`` also matches these; str.split() alone would miss U+FEFF.
_WHITESPACE_RE = re.compile(r"[\s\ufeff]+")

# A token ending in one of these is a fragment of a name built at runtime.
PARTIAL_SUFFIXES = ("-", ":")


def split_class_list(text: str) -> list[str]:
    """Split a class list on whitespace, dropping empty tokens."""
    return [token for token in _WHITESPACE_RE.split(text) if token]


def is_partial_token(token: str) -> bool:
    return token.endswith(PARTIAL_SUFFIXES)


@dataclass
class UsageIndex:
    """How often each token appears in program text, plus dynamic prefixes.

    Counts only order allocation; they are never consulted while rewriting.
    Counters only grow, so indexes built independently can be merged.
    """

    counts: Counter[str] = field(default_factory=Counter)
    dynamic_prefixes: set[str] = field(default_factory=set)

    def record_class_list(self, text: str) -> None:
        self.counts.update(split_class_list(text))

    def record_prefix(self, token: str) -> None:
        if token and is_partial_token(token):
            self.dynamic_prefixes.add(token)

    def count(self, token: str) -> int:
        return self.counts.get(token, 0)

    def has_dynamic_prefix(self, token: str) -> bool:
        """Return True if *token* may be produced by a runtime-built class name."""
        return any(token.startswith(prefix) for prefix in self.dynamic_prefixes)

    def merge(self, other: UsageIndex) -> None:
        self.counts.update(other.counts)
        self.dynamic_prefixes.update(other.dynamic_prefixes)
