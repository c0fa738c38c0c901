"""Inspect command."""

import click
from pathlib import Path

from hive.bundle import BundleError, read_bundle


@click.command()
@click.argument("bundle_path", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
def inspect(bundle_path: Path):
    """Show the contents of a bundle."""
    try:
        bundle = read_bundle(bundle_path)
    except BundleError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()

    directive = bundle.directive
    click.echo(f"📦 {bundle_path.name}")
    click.echo(f"   Identifier: {directive.identifier}")
    click.echo(f"   App version: {directive.app_version}")
    click.echo(f"   Handlers: {len(directive.handlers)}")

    click.echo(f"   Modules ({len(bundle.modules)}):")
    for ref in bundle.modules:
        click.echo(f"     {ref.name} ({len(ref.module_bytes())} bytes)")

    static_names = bundle.static_file_names()
    click.echo(f"   Static files ({len(static_names)}):")
    for name in static_names:
        click.echo(f"     {name}")
