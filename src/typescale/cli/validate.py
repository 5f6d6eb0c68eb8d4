"""CLI command: typescale validate -- check a stylesheet without emitting it."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from typescale.errors import ConfigError
from typescale.model.diagnostic import Diagnostic, Severity
from typescale.stylesheet import ParseError, parse_stylesheet
from typescale.transforms import apply_transforms
from typescale.transforms.typography import FONT_SIZE, SKIPPED_RULE_IDS


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True))
@click.option("--strict", is_flag=True, help="Treat invalid line-heights as errors")
def validate(stylesheet: str, strict: bool) -> None:
    """Parse STYLESHEET and resolve its type scale without writing CSS.

    Prints diagnostics and a summary of how many sized rules resolved and how
    many would be skipped by ``build``. Exits with code 1 if any error was
    reported.
    """
    source_path = Path(stylesheet)

    try:
        parsed = parse_stylesheet(source_path.read_text(encoding="utf-8"))
        _, diagnostics = apply_transforms(parsed, strict=strict)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    sized = sum(1 for rule in parsed.rules if rule.get(FONT_SIZE) is not None)
    skipped = _skipped_rules(diagnostics)
    scale = f"{sized - skipped} of {sized} sized rule(s) resolved, {skipped} skipped"

    if not diagnostics:
        click.echo(f"OK: {source_path.name} is valid ({scale})")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    counts = {severity: 0 for severity in Severity}
    for diag in diagnostics:
        counts[diag.severity] += 1

    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info; "
        f"{scale}"
    )

    if counts[Severity.ERROR]:
        sys.exit(1)
    sys.exit(0)


def _skipped_rules(diagnostics: list[Diagnostic]) -> int:
    return sum(1 for d in diagnostics if d.is_error and d.rule in SKIPPED_RULE_IDS)
