"""Robinson CLI entry point: Click group with subcommands."""

import logging

import click

from robinson import __version__


@click.group()
@click.version_option(version=__version__, prog_name="robinson")
@click.option("--verbose", is_flag=True, help="Log parser activity to stderr")
def cli(verbose: bool) -> None:
    """Robinson - parse HTML and CSS into trees."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from robinson.cli.css import css  # noqa: E402
from robinson.cli.html import html  # noqa: E402

cli.add_command(html)
cli.add_command(css)
