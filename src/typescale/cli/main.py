"""typescale CLI entry point: Click group with subcommands."""

import logging

import click

from typescale import __version__


@click.group()
@click.version_option(version=__version__, prog_name="typescale")
@click.option("-v", "--verbose", is_flag=True, help="Log transform details to stderr")
def cli(verbose: bool) -> None:
    """typescale - vertical-rhythm font sizing for stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from typescale.cli.build import build  # noqa: E402
from typescale.cli.resolve import resolve  # noqa: E402
from typescale.cli.validate import validate  # noqa: E402

cli.add_command(resolve)
cli.add_command(build)
cli.add_command(validate)
