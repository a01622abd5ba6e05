"""mimicss CLI entry point: Click group with subcommands."""

import click

from mimicss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mimicss")
def cli() -> None:
    """mimicss - shorten CSS class names across stylesheets and scripts."""


# Import and register subcommands
from mimicss.cli.inspect import inspect  # noqa: E402
from mimicss.cli.minify import minify  # noqa: E402

cli.add_command(minify)
cli.add_command(inspect)
