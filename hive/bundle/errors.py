"""Errors raised by the bundle codec."""


class BundleError(Exception):
    """Base error for bundle read/write failures."""


class MissingDirectiveError(BundleError):
    """Raised when a bundle archive does not contain a directive."""


class DirectiveError(BundleError):
    """Raised when a directive cannot be decoded."""


class ModuleResolutionError(BundleError):
    """Raised when a Wasm module reference has neither bytes nor a readable filepath."""


class StaticFileNotFoundError(BundleError, FileNotFoundError):
    """Raised when a static file is not present in a bundle."""

    def __init__(self, file_path: str):
        super().__init__(f"static file does not exist: {file_path}")
        self.file_path = file_path
