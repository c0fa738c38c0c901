from .errors import (
    BundleError,
    DirectiveError,
    MissingDirectiveError,
    ModuleResolutionError,
    StaticFileNotFoundError,
)
from .module_ref import WasmModuleRef
from .schema import Bundle, FileFunc
from .reader import read_bundle
from .writer import write_bundle

__all__ = [
    "Bundle",
    "BundleError",
    "DirectiveError",
    "FileFunc",
    "MissingDirectiveError",
    "ModuleResolutionError",
    "StaticFileNotFoundError",
    "WasmModuleRef",
    "read_bundle",
    "write_bundle",
]
