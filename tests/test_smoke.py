"""
Minimal smoke test for the package structure.
Tests that the public imports and the CLI entrypoint are wired up.
"""

from click.testing import CliRunner


def test_imports():
    """Test that all public imports work"""
    from hive import Bundle, Directive, WasmModuleRef, read_bundle, write_bundle
    from hive.bundle import BundleError, FileFunc, StaticFileNotFoundError

    assert issubclass(StaticFileNotFoundError, BundleError)
    assert callable(read_bundle) and callable(write_bundle)


def test_cli_help():
    """Test that the CLI lists its commands"""
    from hive_cli.main import cli

    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("build", "inspect", "extract"):
        assert command in result.output
