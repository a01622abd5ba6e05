from mimicss.stylesheet.model import AtRule, Declaration, PreludeSegment, StyleRule, Stylesheet
from mimicss.stylesheet.parser import parse_stylesheet
from mimicss.stylesheet.rewriter import collect_classes, rename_classes
from mimicss.stylesheet.selectors import ClassComponent, find_class_components, unescape_ident

__all__ = [
    "parse_stylesheet",
    "collect_classes",
    "rename_classes",
    "find_class_components",
    "unescape_ident",
    "Stylesheet",
    "StyleRule",
    "AtRule",
    "Declaration",
    "PreludeSegment",
    "ClassComponent",
]
