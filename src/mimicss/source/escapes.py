"""Cooking and re-escaping JavaScript string and template literal text."""

from __future__ import annotations

import re

__all__ = ["cook", "escape_string", "escape_template"]

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

_SINGLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    # line continuations
    "\n": "",
    "\r": "",
    "\r\n": "",
    "\u2028": "",
    "\u2029": "",
}

_STRING_SPECIALS = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _decode(match: re.Match[str]) -> str:
    seq = match.group(1)
    if seq.startswith("u{"):
        return chr(min(int(seq[2:-1], 16), 0x10FFFF))
    if len(seq) == 5 and seq[0] == "u":
        return chr(int(seq[1:], 16))
    if len(seq) == 3 and seq[0] == "x":
        return chr(int(seq[1:], 16))
    return _SINGLE_ESCAPES.get(seq, seq)


def cook(raw: str) -> str:
    """Return the runtime value of literal source text *raw*."""
    if "\\" not in raw:
        return raw
    return _ESCAPE_RE.sub(_decode, raw)


def _escape_char(ch: str, specials: dict[str, str]) -> str:
    if ch in specials:
        return specials[ch]
    if "\ud800" <= ch <= "\udfff":
        return f"\\u{ord(ch):04x}"
    return ch


def escape_string(text: str, quote: str) -> str:
    """Escape *text* for a string literal delimited by *quote*."""
    specials = dict(_STRING_SPECIALS)
    specials[quote] = "\\" + quote
    return "".join(_escape_char(ch, specials) for ch in text)


def escape_template(text: str) -> str:
    """Escape *text* for the literal part of a template literal."""
    specials = {"\\": "\\\\", "`": "\\`", "$": "\\$"}
    return "".join(_escape_char(ch, specials) for ch in text)
