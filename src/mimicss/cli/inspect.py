"""CLI command: mimicss inspect -- print the class map without writing files."""

from __future__ import annotations

import json
import sys

import click

from mimicss.cli.files import build_config, collect_artifacts, setup_logging
from mimicss.errors import ParseError
from mimicss.minifier import ClassMinifier


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--exclude", "-e", multiple=True, help="Regex of class names to keep (repeatable)")
@click.option("--config", "config_file", type=click.Path(exists=True), default=None, help="TOML config file")
@click.option("--verbose", "-v", count=True, help="Log analysis progress to stderr")
def inspect(
    paths: tuple[str, ...],
    exclude: tuple[str, ...],
    config_file: str | None,
    verbose: int,
) -> None:
    """Print the class map that minify would use, as JSON."""
    setup_logging(verbose)
    config = build_config(config_file, exclude, verbose)
    artifacts = [artifact for _, artifact in collect_artifacts(paths)]

    minifier = ClassMinifier(config.options())
    for artifact in artifacts:
        if artifact.is_program:
            minifier.analyze_js(artifact.text)
    try:
        minifier.extract_from_css("\n".join(a.text for a in artifacts if a.is_stylesheet))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(minifier.get_mapping(), indent=2))
