"""Configuration: engine options and the file-backed run configuration."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from mimicss.errors import ConfigError

__all__ = ["MinifierOptions", "MinifierConfig", "compile_patterns", "load_config"]

DEFAULT_MAP_FILE = "class-map.json"

_CONFIG_KEYS = frozenset({"exclude", "verbose", "map_file"})


def compile_patterns(patterns: Iterable[str | re.Pattern[str]]) -> tuple[re.Pattern[str], ...]:
    """Compile exclude patterns, keeping already compiled ones as they are."""
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ConfigError(f"Invalid exclude pattern {pattern!r}: {exc}") from exc
    return tuple(compiled)


@dataclass(frozen=True)
class MinifierOptions:
    """Options consumed by :class:`~mimicss.minifier.ClassMinifier`.

    ``exclude`` patterns are tested with ``re.search``; a class matching any of
    them keeps its name, and a generated name matching any of them is skipped.
    Patterns that match every possible generated name make allocation loop
    forever. That configuration is not detected.
    """

    exclude: tuple[re.Pattern[str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude", compile_patterns(self.exclude))


@dataclass(frozen=True)
class MinifierConfig:
    exclude: tuple[str, ...] = ()
    verbose: bool = False
    map_file: str = DEFAULT_MAP_FILE
    source: Path | None = field(default=None, compare=False)

    def options(self) -> MinifierOptions:
        return MinifierOptions(exclude=compile_patterns(self.exclude))

    def merged(
        self,
        exclude: Iterable[str] = (),
        verbose: bool | None = None,
        map_file: str | None = None,
    ) -> MinifierConfig:
        """Return a copy with command-line values layered on top."""
        return MinifierConfig(
            exclude=self.exclude + tuple(exclude),
            verbose=self.verbose if verbose is None else verbose,
            map_file=map_file or self.map_file,
            source=self.source,
        )


def _table(document: dict[str, Any]) -> dict[str, Any]:
    tool = document.get("tool")
    if isinstance(tool, dict) and "mimicss" in tool:
        table = tool["mimicss"]
        if not isinstance(table, dict):
            raise ConfigError("[tool.mimicss] must be a table")
        return table
    if "tool" in document:
        return {}
    return document


def load_config(path: str | Path) -> MinifierConfig:
    """Load a :class:`MinifierConfig` from a TOML file.

    Reads the ``[tool.mimicss]`` table of a pyproject-style file, or top-level
    keys of a dedicated file. Unknown keys and bad values raise ConfigError.
    """
    config_path = Path(path)
    try:
        document = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    table = _table(document)
    unknown = sorted(set(table) - _CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {config_path}: {', '.join(unknown)}")

    exclude = table.get("exclude", [])
    if isinstance(exclude, str):
        exclude = [exclude]
    if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
        raise ConfigError("'exclude' must be a string or a list of strings")
    compile_patterns(exclude)

    verbose = table.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError("'verbose' must be a boolean")

    map_file = table.get("map_file", DEFAULT_MAP_FILE)
    if not isinstance(map_file, str) or not map_file:
        raise ConfigError("'map_file' must be a non-empty string")

    return MinifierConfig(
        exclude=tuple(exclude),
        verbose=verbose,
        map_file=map_file,
        source=config_path,
    )
