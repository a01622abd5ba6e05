"""Short identifier generation over a frequency-ordered CSS alphabet.

Names are produced by a bijective mixed-radix scheme: the first character is
drawn from LEADING_CHARS (legal at the start of a CSS identifier), every
following character from ALL_CHARS. Index 0..52 yields one character, the
next 53 * 64 indexes two characters, and so on.
"""

from __future__ import annotations

__all__ = ["LEADING_CHARS", "FOLLOWING_ONLY_CHARS", "ALL_CHARS", "NameGenerator"]

# a-z, A-Z and underscore: 53 characters
LEADING_CHARS: tuple[str, ...] = tuple(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

# Digits and hyphen may only follow the first character: 11 characters
FOLLOWING_ONLY_CHARS: tuple[str, ...] = tuple("0123456789-")

ALL_CHARS: tuple[str, ...] = LEADING_CHARS + FOLLOWING_ONLY_CHARS


class NameGenerator:
    """Map allocation indexes to short names, favouring frequent characters.

    The generator keeps no allocation history: ``generate`` is a pure function
    of the index and the current alphabet order.
    """

    def __init__(self) -> None:
        self._leading: tuple[str, ...] = LEADING_CHARS
        self._all: tuple[str, ...] = ALL_CHARS
        self._frequency: dict[str, int] = {}
        self.reset()

    @property
    def leading_chars(self) -> tuple[str, ...]:
        return self._leading

    @property
    def all_chars(self) -> tuple[str, ...]:
        return self._all

    def reset(self) -> None:
        """Zero the frequency count of every alphabet character."""
        self._frequency = dict.fromkeys(ALL_CHARS, 0)

    def record_usage(self, text: str, weight: int = 1) -> None:
        """Add *weight* to the count of each known character in *text*."""
        for ch in text:
            if ch in self._frequency:
                self._frequency[ch] += weight

    def frequency(self, ch: str) -> int:
        return self._frequency.get(ch, 0)

    def sort_by_frequency(self) -> None:
        """Reorder both alphabets by descending count.

        ``sorted`` is stable, so ties keep the base alphabet order.
        """
        self._leading = tuple(sorted(LEADING_CHARS, key=lambda ch: -self._frequency[ch]))
        self._all = tuple(sorted(ALL_CHARS, key=lambda ch: -self._frequency[ch]))

    def generate(self, index: int) -> str:
        """Return the name at position *index* of the current ordering."""
        if index < 0:
            raise ValueError(f"Name index must be non-negative, got {index}")
        chars: list[str] = []
        base = len(self._leading)
        num = index + 1
        while True:
            num -= 1
            if chars:
                chars.append(self._all[num % base])
            else:
                chars.append(self._leading[num % base])
            num //= base
            base = len(self._all)
            if num <= 0:
                break
        return "".join(chars)
