"""Error types raised by the minification engine and its configuration layer."""

from __future__ import annotations


class MimicssError(Exception):
    """Base class for every error raised by mimicss."""


class ParseError(MimicssError):
    """Raised when stylesheet or program text cannot be parsed.

    ``kind`` is ``"stylesheet"`` or ``"program"``; ``line`` and ``column`` are
    1-based and ``None`` when the underlying parser did not report them.
    """

    def __init__(
        self,
        message: str,
        kind: str,
        line: int | None = None,
        column: int | None = None,
    ):
        self.kind = kind
        self.line = line
        self.column = column
        location = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"{kind} parse error{location}: {message}")


class ConfigError(MimicssError):
    """Raised when a configuration file or option value is invalid."""
