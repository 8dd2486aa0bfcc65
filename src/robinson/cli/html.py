"""CLI command: robinson html -- parse an HTML file and print its DOM tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from robinson.config import ParserConfig
from robinson.dom import dump, parse_html
from robinson.errors import ParseError


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--legacy-quotes",
    is_flag=True,
    help="Accept '/' as an attribute value quote",
)
def html(htmlfile: str, legacy_quotes: bool) -> None:
    """Parse an HTML file and print its DOM tree, one node per line."""
    config = ParserConfig.legacy() if legacy_quotes else ParserConfig()
    try:
        source = Path(htmlfile).read_text(encoding="utf-8")
        root = parse_html(source, config)
    except (ParseError, UnicodeDecodeError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(dump(root))
