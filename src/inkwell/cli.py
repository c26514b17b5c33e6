#!/usr/bin/env python3
"""
Main CLI entry point for the Inkwell server.
"""

import asyncio
import sys

import click
import uvicorn

from inkwell import __version__
from inkwell.config import settings
from inkwell.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="inkwell")
def cli() -> None:
    """Inkwell CLI - serve the API and manage demo content."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Inkwell API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)
    logger.info("Starting Inkwell API server", host=host, port=port, reload=reload)

    try:
        uvicorn.run(
            "inkwell.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def seed() -> None:
    """Create tables and insert demo writers and articles."""
    from inkwell.database import create_tables, get_async_session, init_database
    from inkwell.database.seed_data import seed_demo_content

    configure_logging(debug=settings.debug)

    async def do_seed() -> bool:
        init_database()
        await create_tables()
        async with get_async_session() as db:
            return await seed_demo_content(db)

    try:
        written = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed demo content", error=str(e))
        click.echo(f"✗ Error seeding demo content: {e}", err=True)
        sys.exit(1)

    if written:
        click.echo("✓ Demo content created")
    else:
        click.echo("Demo content already present, nothing to do")


@cli.command()
def schema() -> None:
    """Print the GraphQL schema (SDL)."""
    from inkwell.host import create_host

    configure_logging(log_level="warning")
    click.echo(create_host().schema.as_str())


if __name__ == "__main__":
    cli()
