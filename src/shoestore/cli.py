#!/usr/bin/env python3
"""
Main CLI entry point for the Shoe Store backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from shoestore import __version__
from shoestore.config import settings
from shoestore.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="shoestore")
def cli() -> None:
    """Shoe Store CLI - manage the server and its data."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Shoe Store API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Shoe Store API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are read at import time, so pass them on through the environment
    if log_level == "debug":
        os.environ["SHOESTORE_DEBUG"] = "true"
        os.environ["SHOESTORE_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("SHOESTORE_DEBUG", "false")
        os.environ.setdefault("SHOESTORE_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "shoestore.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from shoestore.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def seed() -> None:
    """Seed the database with the sample shoes."""
    from shoestore.database.connection import dispose_database, get_async_session
    from shoestore.database.seed_data import seed_sample_shoes

    configure_logging()

    async def do_seed():
        try:
            async with get_async_session() as db:
                shoes = await seed_sample_shoes(db)
        finally:
            await dispose_database()

        click.echo(f"✓ Database seeded with {len(shoes)} shoe(s)")
        for shoe in shoes:
            click.echo(f"  {shoe.shoe_id}  {shoe.name}")

    try:
        asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)


@cli.group()
def db() -> None:
    """Apply or revert database migrations."""
    pass


@db.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    from shoestore.database.migrations import upgrade_schema

    configure_logging()

    try:
        upgrade_schema(revision)
    except Exception as e:
        logger.error("Database upgrade failed", revision=revision, error=str(e))
        click.echo(f"✗ Error upgrading database: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Database upgraded to {revision}")


@db.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade the schema to REVISION (default: one step back)."""
    from shoestore.database.migrations import downgrade_schema

    configure_logging()

    try:
        downgrade_schema(revision)
    except Exception as e:
        logger.error("Database downgrade failed", revision=revision, error=str(e))
        click.echo(f"✗ Error downgrading database: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Database downgraded to {revision}")


@cli.group()
def shoes() -> None:
    """Inspect the shoe inventory."""
    pass


@shoes.command("list")
@click.option("--trending", is_flag=True, default=False, help="Only trending shoes")
@click.option("--sold-out", is_flag=True, default=False, help="Only sold-out shoes")
def list_shoes(trending: bool, sold_out: bool) -> None:
    """List shoes stored in the database."""
    from sqlalchemy import select

    from shoestore.database.connection import dispose_database, get_async_session
    from shoestore.dbmodels import Shoes

    configure_logging()

    async def do_list():
        stmt = select(Shoes)
        if trending:
            stmt = stmt.where(Shoes.is_trending.is_(True))
        if sold_out:
            stmt = stmt.where(Shoes.is_sold_out.is_(True))

        try:
            async with get_async_session() as db:
                result = await db.execute(stmt)
                return result.scalars().all()
        finally:
            await dispose_database()

    try:
        rows = asyncio.run(do_list())
    except Exception as e:
        logger.error("Failed to list shoes", error=str(e))
        click.echo(f"✗ Error listing shoes: {e}", err=True)
        sys.exit(1)

    if not rows:
        click.echo("No shoes found.")
        return

    click.echo(f"Found {len(rows)} shoe(s):")
    click.echo()
    for shoe in rows:
        click.echo(f"  ID: {shoe.shoe_id}")
        click.echo(f"  Name: {shoe.name}")
        click.echo(f"  Price: {shoe.price}")
        click.echo(f"  Trending: {'yes' if shoe.is_trending else 'no'}")
        click.echo(f"  Sold out: {'yes' if shoe.is_sold_out else 'no'}")
        click.echo()


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
