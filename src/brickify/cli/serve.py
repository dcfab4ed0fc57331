"""CLI command: brickify serve -- run the HTTP API."""

from __future__ import annotations

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Start the conversion API server."""
    from brickify.web.app import create_app

    app = create_app()
    click.echo(f"Starting brickify on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
