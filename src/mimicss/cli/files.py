"""Shared CLI helpers: artifact discovery and configuration assembly."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from mimicss.config import MinifierConfig, load_config
from mimicss.errors import ConfigError
from mimicss.model.artifact import Artifact, ArtifactKind, classify_artifact


def collect_artifacts(paths: tuple[str, ...]) -> list[tuple[Path, Artifact]]:
    """Read every stylesheet and program file under *paths*.

    Directories are searched recursively; artifact names are relative to the
    directory they were found in, or the bare file name for explicit files.
    """
    found: list[tuple[Path, Artifact]] = []
    for raw in paths:
        root = Path(raw)
        if root.is_dir():
            candidates = [(p, p.relative_to(root).as_posix()) for p in sorted(root.rglob("*"))]
        else:
            candidates = [(root, root.name)]
        for path, name in candidates:
            if not path.is_file() or classify_artifact(name) is ArtifactKind.OTHER:
                continue
            found.append((path, Artifact.from_name(name, path.read_text(encoding="utf-8"))))
    return found


def build_config(
    config_file: str | None,
    exclude: tuple[str, ...],
    verbose: int,
    map_file: str | None = None,
) -> MinifierConfig:
    """Layer command-line options over an optional config file."""
    try:
        base = load_config(config_file) if config_file else MinifierConfig()
        config = base.merged(exclude=exclude, verbose=verbose > 0 or None, map_file=map_file)
        config.options()
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        raise SystemExit(1) from exc
    return config


def setup_logging(verbose: int) -> None:
    if verbose <= 0:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose > 1 else logging.INFO,
        format="[%(name)s] %(levelname)s %(message)s",
    )
