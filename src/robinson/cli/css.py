"""CLI command: robinson css -- parse a CSS file and print its rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from robinson.errors import ParseError
from robinson.stylesheet import parse_css, specificity


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def css(cssfile: str) -> None:
    """Parse a CSS file and print each rule.

    Selectors are listed most specific first, each with its
    (ids, classes, tags) specificity.
    """
    try:
        source = Path(cssfile).read_text(encoding="utf-8")
        stylesheet = parse_css(source)
    except (ParseError, UnicodeDecodeError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    for rule in stylesheet.rules:
        click.echo()
        for selector in rule.selectors:
            ids, classes, tags = specificity(selector)
            click.echo(f"  {selector}  ({ids},{classes},{tags})")
        for declaration in rule.declarations:
            click.echo(f"    {declaration}")
