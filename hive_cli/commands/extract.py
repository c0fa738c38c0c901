"""Extract command."""

import click
from pathlib import Path
from typing import Iterable

from hive.bundle import BundleError, FileFunc, read_bundle
from hive.bundle.schema import DIRECTIVE_FILENAME, STATIC_PREFIX


def export_static_files(fetch: FileFunc, names: Iterable[str], output_dir: Path) -> int:
    """Write each named static file into output_dir/static, returning the count."""
    static_dir = output_dir / STATIC_PREFIX
    static_dir.mkdir(parents=True, exist_ok=True)

    count = 0
    for name in names:
        target = static_dir / name
        if static_dir.resolve() not in target.resolve().parents:
            raise BundleError(f"refusing to extract {name} outside {static_dir}")

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(fetch(name))
        count += 1
    return count


@click.command()
@click.argument("bundle_path", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", required=True, type=click.Path(file_okay=False, path_type=Path), help="Output directory")
def extract(bundle_path: Path, output: Path):
    """Extract the directive, modules and static files of a bundle."""
    try:
        bundle = read_bundle(bundle_path)
        output.mkdir(parents=True, exist_ok=True)

        (output / DIRECTIVE_FILENAME).write_bytes(bundle.directive.marshal())

        for ref in bundle.modules:
            (output / Path(ref.name).name).write_bytes(ref.module_bytes())

        static_count = export_static_files(bundle.static_file, bundle.static_file_names(), output)
    except (BundleError, OSError) as e:
        click.echo(f"❌ Extract failed: {e}", err=True)
        raise click.Abort()

    click.echo(f"✅ Extracted to {output}")
    click.echo(f"   Modules: {len(bundle.modules)}")
    click.echo(f"   Static files: {static_count}")
