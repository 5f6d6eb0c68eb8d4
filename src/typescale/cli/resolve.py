"""CLI command: typescale resolve -- resolve one font size."""

from __future__ import annotations

import sys

import click

from typescale.config import load_config
from typescale.emit import style_declarations
from typescale.errors import ConfigError, InvalidLineHeightValue, InvalidMagnitude
from typescale.resolver import Resolver
from typescale.stylesheet import ParseError


@click.command()
@click.argument("size")
@click.option(
    "--line-height",
    default=None,
    help="auto (default), a unitless number, inherit, normal, or false",
)
@click.option("--base-font-size", default=None, help="Base font size, e.g. 16px")
@click.option("--base-line-height", default=None, help="Base line height, e.g. 24px or 1.5")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Stylesheet whose $base-font-size / $base-line-height to use",
)
@click.option("--strict", is_flag=True, help="Fail on an invalid line-height")
def resolve(
    size: str,
    line_height: str | None,
    base_font_size: str | None,
    base_line_height: str | None,
    config_path: str | None,
    strict: bool,
) -> None:
    """Print the declarations for a SIZE such as 32px."""
    try:
        config = load_config(
            config_path,
            base_font_size=base_font_size,
            base_line_height=base_line_height,
        )
    except (ConfigError, ParseError) as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    try:
        style = Resolver(config, strict=strict).resolve(size, line_height)
    except (InvalidMagnitude, InvalidLineHeightValue) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for diag in style.diagnostics:
        click.echo(str(diag), err=True)
    for decl in style_declarations(style):
        click.echo(str(decl))
