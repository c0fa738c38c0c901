"""Bundle schema - archive layout shared by the reader and the writer."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, FrozenSet, List

from loguru import logger

from hive.bundle.archive import open_archive, read_entry
from hive.bundle.errors import StaticFileNotFoundError
from hive.bundle.module_ref import WasmModuleRef
from hive.models import Directive

DIRECTIVE_FILENAME = "Directive.yaml"
SHADOWED_DIRECTIVE_NAMES = frozenset({"Directive.yaml", "Directive.yml"})
STATIC_PREFIX = "static/"
MODULE_SUFFIX = ".wasm"

# owner read/write/execute only
BUNDLE_FILE_MODE = 0o700

# FileFunc returns the contents of a requested file
FileFunc = Callable[[str], bytes]


def strip_prefix(value: str, prefix: str) -> str:
    if value.startswith(prefix):
        return value[len(prefix) :]

    return value


@dataclass(frozen=True, eq=False)
class Bundle:
    """A Runnable bundle read from disk.

    Holds the parsed directive and the Wasm modules (bytes already loaded). Static
    files are only indexed by name; their contents are read from the archive on
    each request. Bundles compare and hash by identity.
    """

    path: Path
    directive: Directive
    modules: List[WasmModuleRef] = field(default_factory=list)
    static_files: FrozenSet[str] = field(default_factory=frozenset, repr=False)

    def _logical_name(self, file_path: str) -> str:
        # an indexed name wins, so static/static/x stays reachable as static/x
        if file_path in self.static_files:
            return file_path

        return strip_prefix(file_path, STATIC_PREFIX)

    def has_static_file(self, file_path: str) -> bool:
        return self._logical_name(file_path) in self.static_files

    def static_file_names(self) -> List[str]:
        return sorted(self.static_files)

    def static_file(self, file_path: str) -> bytes:
        """Return the contents of a static file from the bundle.

        Args:
            file_path: Logical name of the file, with or without the ``static/`` prefix

        Returns:
            The file contents, re-read from the archive on every call

        Raises:
            StaticFileNotFoundError: if the bundle has no such static file
            BundleError: if the archive cannot be opened or the entry cannot be read
        """
        if not self.has_static_file(file_path):
            raise StaticFileNotFoundError(file_path)

        entry_name = f"{STATIC_PREFIX}{self._logical_name(file_path)}"

        with open_archive(self.path) as archive:
            for info in archive.infolist():
                if info.filename == entry_name:
                    return read_entry(archive, info)

        # The archive changed on disk since it was indexed
        logger.warning(f"Static file {entry_name} is indexed but missing from {self.path}, returning empty contents")
        return b""
