"""json2css CLI entry point: Click group with subcommands."""

import logging

import click

from json2css import __version__


@click.group()
@click.version_option(version=__version__, prog_name="json2css")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
def cli(verbose: bool, quiet: bool) -> None:
    """json2css - render JSON stylesheet trees as CSS."""
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from json2css.cli.encode import encode  # noqa: E402
from json2css.cli.check import check  # noqa: E402
from json2css.cli.serve import serve  # noqa: E402

cli.add_command(encode)
cli.add_command(check)
cli.add_command(serve)
