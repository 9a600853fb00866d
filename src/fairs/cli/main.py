#!/usr/bin/env python3
"""
Main CLI Entry Point for Fairs

Provides unified command-line interface for bill splitting tools.
"""


import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Fairs - Expense Splitting

    Split a shared bill: allocate items and tip between people, and turn
    scanned receipt text into items.
    """
    ctx.ensure_object(dict)

    if config_env:
        import os

        os.environ["FAIRS_ENV"] = config_env

    if debug:
        import logging
        import os

        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("fairs").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from fairs import __author__, __version__

    click.echo(f"Fairs v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Currency: {config_obj.currency_code} ({config_obj.currency_symbol})")
    click.echo(f"  Scan Max Price: {config_obj.scan.max_price}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .bill import allocate, summary  # noqa: E402
from .groups import groups  # noqa: E402
from .scan import scan  # noqa: E402

main.add_command(allocate)
main.add_command(summary)
main.add_command(scan)
main.add_command(groups)


if __name__ == "__main__":
    main()
