"""ClassMinifier: the per-build orchestrator of the minification phases.

Phases must run in order::

    analyze_js (any number of chunks) -> extract_from_css (once)
        -> transform_css / transform_js (any number of times)

All state lives on the instance; use one instance per build.
"""

from __future__ import annotations

import re
from typing import Iterable

from mimicss.config import MinifierOptions
from mimicss.errors import ParseError
from mimicss.model.classmap import ClassMap
from mimicss.model.usage import UsageIndex
from mimicss.names import NameGenerator
from mimicss.source.parser import parse_program
from mimicss.source.rewrite import rewrite_program, scan_usage
from mimicss.stylesheet.rewriter import collect_classes, rename_classes

__all__ = ["ClassMinifier"]


class ClassMinifier:
    """Rename CSS classes to short names in stylesheets and program text."""

    def __init__(
        self,
        options: MinifierOptions | None = None,
        *,
        exclude: Iterable[str | re.Pattern[str]] | None = None,
    ) -> None:
        if options is None:
            options = MinifierOptions(exclude=tuple(exclude or ()))
        elif exclude:
            raise TypeError("Pass exclude patterns via options or keyword, not both")
        self.options = options
        self.usage = UsageIndex()
        self.class_map = ClassMap()
        self._names = NameGenerator()
        self._next_index = 0

    # --- exclusion -----------------------------------------------------------

    def is_excluded(self, token: str) -> bool:
        """True if *token* matches an exclude pattern or a dynamic prefix."""
        if any(pattern.search(token) for pattern in self.options.exclude):
            return True
        return self.usage.has_dynamic_prefix(token)

    def _next_name(self) -> str:
        # Does not terminate if the exclude patterns reject every candidate.
        # A candidate equal to an excluded class is itself excluded, so
        # generated names never collide with identity entries.
        while True:
            name = self._names.generate(self._next_index)
            self._next_index += 1
            if not self.is_excluded(name):
                return name

    # --- phases --------------------------------------------------------------

    def analyze_js(self, code: str) -> bool:
        """Count class-token usage in one program chunk.

        Returns False, contributing nothing, if the chunk cannot be parsed.
        """
        try:
            program = parse_program(code)
        except ParseError:
            return False
        scan_usage(program, self.usage)
        return True

    def extract_from_css(self, css: str) -> None:
        """Build the class map from every class selector in *css*.

        Each call starts from scratch: frequencies, allocation cursor and map
        are rebuilt. Raises ParseError for structurally invalid CSS.
        """
        occurrences = collect_classes(css)

        self._names.reset()
        self.class_map.clear()
        self._next_index = 0

        observed: dict[str, None] = {}
        for class_name in occurrences:
            self._names.record_usage(class_name)
            observed.setdefault(class_name, None)
        self._names.sort_by_frequency()

        # Most used in program text first; stable for ties.
        ordered = sorted(observed, key=lambda name: -self.usage.count(name))
        for class_name in ordered:
            if self.is_excluded(class_name):
                self.class_map.assign(class_name, class_name)
            else:
                self.class_map.assign(class_name, self._next_name())

    def transform_css(self, css: str) -> str:
        """Return *css* with every renamed class selector substituted."""

        def rename(class_name: str) -> str | None:
            if self.is_excluded(class_name) or not self.class_map.is_renamed(class_name):
                return None
            return self.class_map.rename(class_name)

        return rename_classes(css, rename)

    def transform_js(self, code: str) -> str:
        """Return *code* with class-list literals rewritten.

        Raises ParseError if *code* cannot be parsed; nothing is recovered.
        """
        return rewrite_program(parse_program(code), self.class_map)

    # --- results -------------------------------------------------------------

    def get_mapping(self) -> dict[str, str]:
        return self.class_map.as_dict()

    def get_class_count(self) -> int:
        return len(self.class_map)
