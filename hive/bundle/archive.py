"""Zip archive helpers shared by the bundle reader and static file lookups."""

import zipfile
import zlib
from pathlib import Path

from hive.bundle.errors import BundleError

# zlib.error: corrupt deflate data, RuntimeError: encrypted entry,
# NotImplementedError: unsupported compression method
ARCHIVE_ERRORS = (OSError, zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError)


def open_archive(path: Path) -> zipfile.ZipFile:
    """Open a bundle archive for random access reads."""
    try:
        return zipfile.ZipFile(path, "r")
    except ARCHIVE_ERRORS as e:
        raise BundleError(f"failed to open bundle {path}: {e}") from e


def read_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
    """Read one archive entry fully into memory."""
    try:
        with archive.open(info) as f:
            return f.read()
    except ARCHIVE_ERRORS as e:
        raise BundleError(f"failed to read {info.filename} from {archive.filename}: {e}") from e
