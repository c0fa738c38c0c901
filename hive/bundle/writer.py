import io
import os
import tempfile
import zipfile
from pathlib import Path
from typing import BinaryIO, Sequence, Set, Tuple, Union

from loguru import logger

from hive.bundle.errors import BundleError
from hive.bundle.schema import (
    BUNDLE_FILE_MODE,
    DIRECTIVE_FILENAME,
    SHADOWED_DIRECTIVE_NAMES,
    STATIC_PREFIX,
)
from hive.models import Directive

# A file to add to a bundle: a filesystem path or a binary file object with a name
FileSource = Union[str, os.PathLike, BinaryIO]

# Fixed timestamp so identical inputs produce identical archives
ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)
ENTRY_FILE_MODE = 0o644


def write_bundle(
    directive: Directive,
    files: Sequence[FileSource],
    static_files: Sequence[FileSource],
    target_path: Union[str, os.PathLike],
) -> Path:
    """Write a Runnable bundle containing a directive, Wasm modules and static files.

    The whole archive is assembled in memory before anything touches target_path,
    so a failure at any stage leaves no partial bundle behind.
    """
    if directive is None:
        raise BundleError("directive must be provided")

    target = Path(target_path)
    contents, entries = _build_archive(directive, files, static_files)
    _write_to_disk(target, contents)

    static_count = sum(1 for name in entries if name.startswith(STATIC_PREFIX))
    module_count = len(entries) - static_count - 1
    logger.info(f"Wrote bundle {target} ({module_count} module files, {static_count} static files)")
    return target


def _build_archive(
    directive: Directive, files: Sequence[FileSource], static_files: Sequence[FileSource]
) -> Tuple[bytes, Set[str]]:
    buf = io.BytesIO()
    written: Set[str] = set()

    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zipf:
        _write_directive(zipf, directive, written)

        for source in files:
            name, contents = _read_source(source)
            base_name = os.path.basename(name)

            if base_name in SHADOWED_DIRECTIVE_NAMES:
                # only the canonical directive that's passed in is bundled
                logger.debug(f"Skipping {name}, bundle directive is generated from the provided Directive")
                continue

            _write_file(zipf, base_name, contents, written)

        for source in static_files:
            name, contents = _read_source(source)
            _write_file(zipf, f"{STATIC_PREFIX}{os.path.basename(name)}", contents, written)

    return buf.getvalue(), written


def _write_directive(zipf: zipfile.ZipFile, directive: Directive, written: Set[str]) -> None:
    try:
        directive_bytes = directive.marshal()
    except Exception as e:
        raise BundleError(f"failed to marshal directive: {e}") from e

    _write_file(zipf, DIRECTIVE_FILENAME, directive_bytes, written)


def _write_file(zipf: zipfile.ZipFile, name: str, contents: bytes, written: Set[str]) -> None:
    if name in written:
        raise BundleError(f"duplicate entry {name} in bundle")

    info = zipfile.ZipInfo(name, date_time=ENTRY_DATE_TIME)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = ENTRY_FILE_MODE << 16

    try:
        zipf.writestr(info, contents)
    except (OSError, ValueError) as e:
        raise BundleError(f"failed to write {name} into bundle: {e}") from e

    written.add(name)
    logger.debug(f"Added {name} to bundle ({len(contents)} bytes)")


def _read_source(source: FileSource) -> Tuple[str, bytes]:
    """Read a file source fully, returning its name and contents."""
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            return str(path), path.read_bytes()
        except OSError as e:
            raise BundleError(f"failed to read file {path}: {e}") from e

    name = getattr(source, "name", None)
    if not isinstance(name, (str, os.PathLike)):
        raise BundleError(f"file object {source!r} has no name")
    name = os.fspath(name)

    try:
        contents = source.read()
    except OSError as e:
        raise BundleError(f"failed to read file {name}: {e}") from e

    if not isinstance(contents, bytes):
        raise BundleError(f"file {name} must be opened in binary mode")

    return name, contents


def _write_to_disk(target: Path, contents: bytes) -> None:
    """Write the finished archive next to target, then move it into place."""
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    except OSError as e:
        raise BundleError(f"failed to write bundle to disk at {target}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(contents)
        os.chmod(tmp_name, BUNDLE_FILE_MODE)
        os.replace(tmp_name, target)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise BundleError(f"failed to write bundle to disk at {target}: {e}") from e
