"""Bundle reader - opens a .wasm.zip archive and builds a Bundle from its entries."""

import os
import zipfile
from pathlib import Path
from typing import List, Optional, Set, Type, Union

from loguru import logger

from hive.bundle.archive import open_archive, read_entry
from hive.bundle.errors import DirectiveError, MissingDirectiveError
from hive.bundle.module_ref import WasmModuleRef
from hive.bundle.schema import DIRECTIVE_FILENAME, MODULE_SUFFIX, STATIC_PREFIX, Bundle
from hive.models import Directive


def read_bundle(path: Union[str, os.PathLike], directive_type: Type[Directive] = Directive) -> Bundle:
    """Read a .wasm.zip file and return the bundle of Wasm modules.

    Module bytes are loaded eagerly, static files are only indexed by name.

    Args:
        path: Path to the bundle archive
        directive_type: Document type used to unmarshal Directive.yaml

    Returns:
        Bundle with the directive, module references and static file index

    Raises:
        BundleError: if the archive cannot be opened or an entry cannot be read
        DirectiveError: if Directive.yaml cannot be decoded
        MissingDirectiveError: if the archive has no Directive.yaml
    """
    bundle_path = Path(path)

    directive: Optional[Directive] = None
    modules: List[WasmModuleRef] = []
    static_files: Set[str] = set()

    with open_archive(bundle_path) as archive:
        for info in archive.infolist():
            name = info.filename

            if info.is_dir():
                continue

            if name == DIRECTIVE_FILENAME:
                directive = _read_directive(archive, info, directive_type, bundle_path)
            elif name.startswith(STATIC_PREFIX):
                # index only, contents are read on request
                static_files.add(name[len(STATIC_PREFIX) :])
            elif name.endswith(MODULE_SUFFIX):
                modules.append(WasmModuleRef.with_data(name, read_entry(archive, info)))
            else:
                logger.debug(f"Ignoring unrecognised entry {name} in {bundle_path}")

    if directive is None:
        raise MissingDirectiveError(f"bundle {bundle_path} did not contain {DIRECTIVE_FILENAME}")

    logger.info(f"Read bundle {bundle_path}: {len(modules)} modules, {len(static_files)} static files")

    return Bundle(
        path=bundle_path,
        directive=directive,
        modules=modules,
        static_files=frozenset(static_files),
    )


def _read_directive(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    directive_type: Type[Directive],
    bundle_path: Path,
) -> Directive:
    directive_bytes = read_entry(archive, info)

    try:
        return directive_type.unmarshal(directive_bytes)
    except Exception as e:
        raise DirectiveError(f"failed to unmarshal {info.filename} from {bundle_path}: {e}") from e
