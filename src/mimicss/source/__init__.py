from mimicss.source.literals import LiteralSpan, StringLiteral, TemplateLiteral, iter_literals
from mimicss.source.parser import Program, parse_program
from mimicss.source.rewrite import (
    NO_CHANGE,
    FullRewrite,
    NoChange,
    PartialRewrite,
    classify,
    rewrite_program,
    scan_usage,
)

__all__ = [
    "parse_program",
    "Program",
    "iter_literals",
    "LiteralSpan",
    "StringLiteral",
    "TemplateLiteral",
    "classify",
    "rewrite_program",
    "scan_usage",
    "NoChange",
    "FullRewrite",
    "PartialRewrite",
    "NO_CHANGE",
]
