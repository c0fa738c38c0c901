"""Shared fixtures for bundle tests."""

from pathlib import Path
from typing import Dict, List

import pytest

from hive.bundle import write_bundle
from hive.models import Directive

# Minimal valid Wasm module header followed by a marker so each module is distinct
WASM_HEADER = b"\x00asm\x01\x00\x00\x00"


@pytest.fixture
def directive() -> Directive:
    return Directive.model_validate(
        {
            "identifier": "com.suborbital.test",
            "appVersion": "v0.1.0",
            "atmoVersion": "v0.0.6",
            "handlers": [
                {
                    "type": "request",
                    "resource": "/hello",
                    "method": "POST",
                    "steps": [{"fn": "helloworld-rs"}],
                }
            ],
            "schedules": [{"name": "tick", "every": {"seconds": 5}, "steps": [{"fn": "tick"}]}],
        }
    )


@pytest.fixture
def module_payloads() -> Dict[str, bytes]:
    return {
        "helloworld-rs.wasm": WASM_HEADER + b"hello",
        "tick.wasm": WASM_HEADER + b"tick",
    }


@pytest.fixture
def static_payloads() -> Dict[str, bytes]:
    return {
        "index.html": b"<html><body>hi</body></html>",
        "config.json": b'{"key": "value"}',
    }


def _write_files(directory: Path, payloads: Dict[str, bytes]) -> List[Path]:
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, contents in payloads.items():
        path = directory / name
        path.write_bytes(contents)
        paths.append(path)
    return paths


@pytest.fixture
def module_files(tmp_path: Path, module_payloads: Dict[str, bytes]) -> List[Path]:
    return _write_files(tmp_path / "modules", module_payloads)


@pytest.fixture
def static_files(tmp_path: Path, static_payloads: Dict[str, bytes]) -> List[Path]:
    return _write_files(tmp_path / "assets", static_payloads)


@pytest.fixture
def bundle_path(tmp_path: Path, directive: Directive, module_files: List[Path], static_files: List[Path]) -> Path:
    return write_bundle(directive, module_files, static_files, tmp_path / "runnables.wasm.zip")
