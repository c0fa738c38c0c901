"""Wasm module references."""

import os
import threading
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from hive.bundle.errors import ModuleResolutionError


class WasmModuleRef:
    """Reference to a Wasm module, either by its bytes or by its filepath.

    A reference starts out resolved (bytes read from a bundle) or unresolved (a
    standalone file on disk). The first call to module_bytes() on an unresolved
    reference reads the file and caches its contents for the lifetime of the
    reference; later calls never touch the filesystem again.

    Usage:
        ref = WasmModuleRef.from_path("build/hello.wasm")
        wasm = ref.module_bytes()
    """

    def __init__(
        self,
        name: str,
        filepath: Optional[Union[str, os.PathLike]] = None,
        data: Optional[bytes] = None,
    ):
        self.name = name
        self.filepath: Optional[Path] = Path(filepath) if filepath is not None else None
        self._data = data
        self._lock = threading.Lock()

    @classmethod
    def with_data(cls, name: str, data: bytes) -> "WasmModuleRef":
        """Create a resolved reference from bytes already in memory."""
        return cls(name=name, data=data)

    @classmethod
    def from_path(cls, filepath: Union[str, os.PathLike], name: Optional[str] = None) -> "WasmModuleRef":
        """Create an unresolved reference to a standalone module file."""
        path = Path(filepath)
        return cls(name=name or path.name, filepath=path)

    @property
    def resolved(self) -> bool:
        return self._data is not None

    def module_bytes(self) -> bytes:
        """Return the module's bytes, loading them from filepath on first use.

        Raises:
            ModuleResolutionError: if there are no cached bytes and no readable filepath
        """
        data = self._data
        if data is not None:
            return data

        with self._lock:
            if self._data is None:
                if self.filepath is None:
                    raise ModuleResolutionError(f"missing Wasm module filepath in ref {self.name!r}")

                try:
                    self._data = self.filepath.read_bytes()
                except OSError as e:
                    raise ModuleResolutionError(f"failed to read Wasm module {self.filepath}: {e}") from e

                logger.debug(f"Loaded Wasm module {self.name} from {self.filepath} ({len(self._data)} bytes)")

            return self._data

    def __repr__(self) -> str:
        state = "resolved" if self.resolved else "unresolved"
        return f"WasmModuleRef(name={self.name!r}, filepath={self.filepath!r}, {state})"
