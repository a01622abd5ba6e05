"""CLI command: mimicss minify -- rewrite stylesheets and scripts in place."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mimicss.bundle import minify_bundle
from mimicss.cli.files import build_config, collect_artifacts, setup_logging
from mimicss.errors import ParseError


def _write(target: Path, text: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--exclude", "-e", multiple=True, help="Regex of class names to keep (repeatable)")
@click.option("--config", "config_file", type=click.Path(exists=True), default=None, help="TOML config file")
@click.option("--out-dir", default=None, help="Write results here instead of in place")
@click.option("--map-file", default=None, help="File name of the class map written in verbose mode")
@click.option("--verbose", "-v", count=True, help="Report progress and write the class map")
def minify(
    paths: tuple[str, ...],
    exclude: tuple[str, ...],
    config_file: str | None,
    out_dir: str | None,
    map_file: str | None,
    verbose: int,
) -> None:
    """Minify class names in the CSS and JavaScript files under PATHS.

    Directories are searched recursively for .css, .js, .mjs, .cjs and .jsx
    files. Program files that fail to parse are left unmodified.
    """
    setup_logging(verbose)
    config = build_config(config_file, exclude, verbose, map_file)

    located = collect_artifacts(paths)
    if not any(artifact.is_stylesheet for _, artifact in located):
        click.echo("No stylesheets found; nothing to minify.", err=True)
        sys.exit(1)

    if out_dir:
        names = [artifact.name for _, artifact in located]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            click.echo(f"Duplicate output name(s) under --out-dir: {', '.join(duplicates)}", err=True)
            sys.exit(1)

    try:
        result = minify_bundle([artifact for _, artifact in located], config)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    written = 0
    for path, artifact in located:
        _write(Path(out_dir) / artifact.name if out_dir else path, artifact.text)
        written += 1

    # Artifacts without a source file (the class map) land beside the inputs.
    first = Path(paths[0])
    root = Path(out_dir) if out_dir else (first if first.is_dir() else first.parent)
    inputs = {id(artifact) for _, artifact in located}
    for artifact in result.artifacts:
        if id(artifact) not in inputs:
            _write(root / artifact.name, artifact.text)
            written += 1

    for name in result.skipped:
        click.echo(f"  skipped {name} (parse error)", err=True)
    click.echo(f"Minified {result.class_count} class(es) across {written} file(s)")
