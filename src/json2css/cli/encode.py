"""CLI command: json2css encode -- render a JSON stylesheet tree as CSS."""

from __future__ import annotations

import sys

import click

from json2css.config import EncoderConfig
from json2css.decoder import decode_statements
from json2css.encoder import encode as encode_statements
from json2css.errors import Json2CssError


def build_config(strict_selectors: bool, max_depth: int) -> EncoderConfig:
    """Map CLI options onto an EncoderConfig."""
    return EncoderConfig(require_selectors=strict_selectors, max_depth=max_depth)


@click.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "-o",
    "--output",
    type=click.File("wb"),
    default="-",
    help="Write CSS here instead of stdout",
)
@click.option("--strict-selectors", is_flag=True, help="Reject rulesets without selectors")
@click.option("--max-depth", default=64, type=click.IntRange(min=1), help="Nesting limit")
def encode(source, output, strict_selectors: bool, max_depth: int) -> None:
    """Read a JSON statement list from SOURCE (default stdin) and write CSS.

    Exits with code 1 if the document cannot be decoded or encoded.
    """
    config = build_config(strict_selectors, max_depth)
    try:
        statements = decode_statements(source.read(), config)
        css = encode_statements(statements, config)
    except Json2CssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    output.write(css)
