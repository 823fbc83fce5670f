#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf server.
"""

import json
import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - serve and query the book catalog."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    debug = log_level == "debug"

    # The global settings were built when the package was imported; bring them
    # in line with the flag before the app module reads them. The environment
    # carries the same values into the reloader's subprocess.
    settings.debug = debug
    settings.log_level = log_level
    os.environ["BOOKSHELF_DEBUG"] = "true" if debug else "false"
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level

    configure_logging(debug=debug, log_level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        if reload:
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("document")
@click.option(
    "--variables",
    default=None,
    help="JSON object of variable values",
)
def query(document: str, variables: str | None) -> None:
    """Execute a GraphQL DOCUMENT against the catalog and print the result."""
    from bookshelf.catalog import default_catalog
    from bookshelf.graphql.schema import schema

    # stdout carries only the JSON result
    configure_logging(stream=sys.stderr)

    variable_values = None
    if variables:
        try:
            variable_values = json.loads(variables)
        except json.JSONDecodeError as e:
            click.echo(f"✗ Invalid --variables JSON: {e}", err=True)
            sys.exit(1)

    result = schema.execute_sync(
        document,
        variable_values=variable_values,
        context_value={"catalog": default_catalog},
    )

    payload: dict = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
        logger.error("Query failed", errors=[error.message for error in result.errors])

    click.echo(json.dumps(payload, indent=2))

    if result.errors:
        sys.exit(1)


@cli.command("schema")
def print_schema_command() -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import print_schema

    click.echo(print_schema())


@cli.command()
def check() -> None:
    """Validate the schema and report catalog integrity."""
    from bookshelf.catalog import default_catalog
    from bookshelf.errors import SchemaValidationError
    from bookshelf.graphql.schema import validate_schema

    configure_logging(stream=sys.stderr)

    try:
        validate_schema()
    except SchemaValidationError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    click.echo("✓ GraphQL schema is valid")

    report = default_catalog.integrity_report()
    click.echo(
        f"  Books: {len(default_catalog.all_books())}  "
        f"Authors: {len(default_catalog.all_authors())}"
    )
    if report["valid"]:
        click.echo("✓ Catalog integrity OK")
    else:
        click.echo(f"⚠️  Catalog integrity warnings ({len(report['warnings'])}):")
        for warning in report["warnings"]:
            click.echo(f"   • {warning}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
