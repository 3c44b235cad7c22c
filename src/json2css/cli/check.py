"""CLI command: json2css check -- decode and encode without writing output."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from json2css.cli.encode import build_config
from json2css.decoder import decode_statements
from json2css.encoder import encode
from json2css.errors import DecodeError, EncodeError


@click.command()
@click.argument("jsonfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict-selectors", is_flag=True, help="Reject rulesets without selectors")
@click.option("--max-depth", default=64, type=click.IntRange(min=1), help="Nesting limit")
def check(jsonfile: str, strict_selectors: bool, max_depth: int) -> None:
    """Check that a JSON stylesheet tree encodes cleanly.

    Prints a one-line summary and exits with code 0 on success, or code 1
    with the first decode or encode error.
    """
    path = Path(jsonfile)
    config = build_config(strict_selectors, max_depth)

    # Decode
    try:
        statements = decode_statements(path.read_bytes(), config)
    except (DecodeError, EncodeError) as exc:  # unknown at-rule types surface here too
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)

    # Encode
    try:
        css = encode(statements, config)
    except EncodeError as exc:
        click.echo(f"Encode error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"OK: {path.name} ({len(statements)} statement(s), {len(css)} byte(s))")
