"""CLI entrypoint."""

import click

from .config import configure_logging
from .commands.build import build
from .commands.inspect import inspect
from .commands.extract import extract


@click.group()
@click.version_option(version="0.1.0", prog_name="hive")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Hive CLI - build and inspect Runnable bundles."""
    configure_logging(verbose)


cli.add_command(build)
cli.add_command(inspect)
cli.add_command(extract)


if __name__ == "__main__":
    cli()
