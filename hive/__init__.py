"""Hive: Runnable bundles of Wasm modules, static files and a directive."""

from .bundle import Bundle, WasmModuleRef, read_bundle, write_bundle
from .models import Directive

__all__ = [
    "Bundle",
    "Directive",
    "WasmModuleRef",
    "read_bundle",
    "write_bundle",
]
