"""Tests for the hive CLI."""

import zipfile

from click.testing import CliRunner

from hive.bundle import read_bundle
from hive.models import Directive
from hive_cli.main import cli


def _write_directive(tmp_path, directive):
    path = tmp_path / "Directive.yaml"
    path.write_bytes(directive.marshal())
    return path


def test_build_creates_bundle(tmp_path, directive, module_files, static_files):
    directive_path = _write_directive(tmp_path, directive)
    output = tmp_path / "out.wasm.zip"
    args = ["build", str(directive_path), "-o", str(output)]
    for path in module_files:
        args += ["-m", str(path)]
    for path in static_files:
        args += ["-s", str(path)]

    result = CliRunner().invoke(cli, args)

    assert result.exit_code == 0, result.output
    assert "Bundle created" in result.output
    bundle = read_bundle(output)
    assert bundle.directive == directive
    assert len(bundle.modules) == 2


def test_build_uses_configured_bundle_name(tmp_path, directive, monkeypatch):
    directive_path = _write_directive(tmp_path, directive)
    monkeypatch.setenv("HIVE_BUNDLE_NAME", "custom.wasm.zip")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, ["build", str(directive_path)])

    assert result.exit_code == 0, result.output
    assert zipfile.is_zipfile(tmp_path / "custom.wasm.zip")


def test_build_rejects_invalid_directive(tmp_path):
    directive_path = tmp_path / "Directive.yaml"
    directive_path.write_bytes(b"- not a directive\n")
    output = tmp_path / "out.wasm.zip"

    result = CliRunner().invoke(cli, ["build", str(directive_path), "-o", str(output)])

    assert result.exit_code != 0
    assert "Build failed" in result.output
    assert not output.exists()


def test_inspect_lists_contents(bundle_path):
    result = CliRunner().invoke(cli, ["inspect", str(bundle_path)])

    assert result.exit_code == 0, result.output
    assert "com.suborbital.test" in result.output
    assert "helloworld-rs.wasm" in result.output
    assert "index.html" in result.output


def test_inspect_reports_missing_directive(tmp_path):
    path = tmp_path / "bundle.wasm.zip"
    with zipfile.ZipFile(path, "w") as zipf:
        zipf.writestr("hello.wasm", b"\x00asm")

    result = CliRunner().invoke(cli, ["inspect", str(path)])

    assert result.exit_code != 0
    assert "did not contain Directive.yaml" in result.output


def test_extract_writes_files(tmp_path, bundle_path, directive, module_payloads, static_payloads):
    output = tmp_path / "extracted"

    result = CliRunner().invoke(cli, ["extract", str(bundle_path), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert Directive.unmarshal((output / "Directive.yaml").read_bytes()) == directive
    for name, contents in module_payloads.items():
        assert (output / name).read_bytes() == contents
    for name, contents in static_payloads.items():
        assert (output / "static" / name).read_bytes() == contents
