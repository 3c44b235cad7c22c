"""CLI command: json2css serve -- run the HTTP encoding endpoint."""

from __future__ import annotations

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--strict-selectors", is_flag=True, help="Reject rulesets without selectors")
@click.option("--max-depth", default=64, type=click.IntRange(min=1), help="Nesting limit")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, strict_selectors: bool, max_depth: int, debug: bool) -> None:
    """Start the json2css web server."""
    from json2css.web.app import create_app

    app = create_app(
        {
            "JSON2CSS_STRICT_SELECTORS": strict_selectors,
            "JSON2CSS_MAX_DEPTH": max_depth,
        }
    )
    click.echo(f"Starting json2css on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
