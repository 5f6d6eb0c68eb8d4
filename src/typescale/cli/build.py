"""CLI command: typescale build -- compile a stylesheet to CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from typescale.emit import emit_stylesheet
from typescale.errors import ConfigError
from typescale.stylesheet import ParseError, parse_stylesheet
from typescale.transforms import apply_transforms


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Write CSS here instead of stdout",
)
@click.option("--base-font-size", default=None, help="Override $base-font-size")
@click.option("--base-line-height", default=None, help="Override $base-line-height")
@click.option("--strict", is_flag=True, help="Treat invalid line-heights as errors")
def build(
    stylesheet: str,
    output: str | None,
    base_font_size: str | None,
    base_line_height: str | None,
    strict: bool,
) -> None:
    """Compile STYLESHEET to CSS.

    Diagnostics go to stderr. Rules with errors are skipped and the rest is
    still written; the exit code is 1 if any error was reported.
    """
    source_path = Path(stylesheet)

    # Step 1: Parse
    try:
        parsed = parse_stylesheet(source_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    # Step 2: Transform
    overrides: dict[str, object] = {}
    if base_font_size is not None:
        overrides["base_font_size"] = base_font_size
    if base_line_height is not None:
        overrides["base_line_height"] = base_line_height
    try:
        result, diagnostics = apply_transforms(parsed, overrides=overrides, strict=strict)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    for diag in diagnostics:
        click.echo(str(diag), err=True)

    # Step 3: Emit
    css = emit_stylesheet(result)
    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(css, nl=False)

    if any(d.is_error for d in diagnostics):
        sys.exit(1)
