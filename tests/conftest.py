"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from yaml2json.cli import cli
from yaml2json.context import ENV_ERROR, ENV_PRETTY


@pytest.fixture(autouse=True)
def clear_yaml2json_env(monkeypatch):
    """Keep settings from the developer's environment out of the tests."""
    monkeypatch.delenv(ENV_PRETTY, raising=False)
    monkeypatch.delenv(ENV_ERROR, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["file.yaml"])
        result = invoke(["--pretty"], input_data="a: 1\\n")
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def yaml_file(tmp_path):
    """Write a YAML file under tmp_path and return its path."""

    def _yaml_file(content, name="input.yaml"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _yaml_file


@pytest.fixture
def multi_doc_yaml():
    """Provide a YAML stream with a header, an end marker and a bare document."""
    return "%YAML 1.2\n---\nname: Alice\n...\n---\nname: Bob\n"
