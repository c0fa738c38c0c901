"""Build command."""

import click
from pathlib import Path
from typing import Optional, Tuple

from hive.bundle import BundleError, DirectiveError, write_bundle
from hive.models import Directive
from hive_cli.config import get_bundle_name


def load_directive(directive_path: Path) -> Directive:
    """Load a Directive from a YAML file on disk."""
    try:
        return Directive.unmarshal(directive_path.read_bytes())
    except OSError as e:
        raise DirectiveError(f"failed to read {directive_path}: {e}") from e


@click.command()
@click.argument("directive_path", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option(
    "--module",
    "-m",
    "modules",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Wasm module to include (repeatable)",
)
@click.option(
    "--static",
    "-s",
    "static_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Static file to include under static/ (repeatable)",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Bundle file to write")
def build(
    directive_path: Path,
    modules: Tuple[Path, ...],
    static_files: Tuple[Path, ...],
    output: Optional[Path],
):
    """Build a bundle from a directive, Wasm modules and static files."""
    output = output or Path.cwd() / get_bundle_name()

    try:
        directive = load_directive(directive_path)
        bundle_path = write_bundle(directive, list(modules), list(static_files), output)
    except BundleError as e:
        click.echo(f"❌ Build failed: {e}", err=True)
        raise click.Abort()

    click.echo(f"✅ Bundle created: {bundle_path}")
    click.echo(f"   Modules: {len(modules)}")
    click.echo(f"   Static files: {len(static_files)}")
