"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from textr.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin.

    Usage:
        result = invoke(["cat", "file.txt"])
        result = invoke(["uniq", "-c"], input_data="a\\na\\n")

    ``input_data`` may be text or bytes.
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def ten_txt(tmp_path):
    path = tmp_path / "ten.txt"
    path.write_text("".join(f"line {i}\n" for i in range(1, 11)))
    return path


@pytest.fixture
def three_txt(tmp_path):
    path = tmp_path / "three.txt"
    path.write_text("one\ntwo\nthree\n")
    return path


@pytest.fixture
def empty_txt(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    return path


@pytest.fixture
def missing_txt(tmp_path):
    return tmp_path / "missing.txt"
