"""Unit tests for settings resolution."""

import pytest

from yaml2json.context import ENV_ERROR, ENV_PRETTY, resolve_settings
from yaml2json.models import ErrorStyle, Settings, Style


def test_defaults():
    settings = resolve_settings(environ={})
    assert settings == Settings()
    assert settings.style is Style.COMPACT
    assert settings.error_style is ErrorStyle.STDERR
    assert settings.pretty is False


def test_flags_win():
    settings = resolve_settings(
        pretty=True, error="json", verbose=True, environ={ENV_ERROR: "silent"}
    )
    assert settings.style is Style.PRETTY
    assert settings.error_style is ErrorStyle.JSON
    assert settings.verbose is True


@pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
def test_pretty_from_environment(value):
    assert resolve_settings(environ={ENV_PRETTY: value}).pretty is True


@pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
def test_compact_from_environment(value):
    assert resolve_settings(environ={ENV_PRETTY: value}).pretty is False


def test_error_style_from_environment():
    settings = resolve_settings(environ={ENV_ERROR: "json"})
    assert settings.error_style is ErrorStyle.JSON


def test_none_is_silent():
    assert resolve_settings(error="none", environ={}).error_style is ErrorStyle.SILENT
    assert ErrorStyle.parse("NONE") is ErrorStyle.SILENT


def test_invalid_pretty_environment():
    with pytest.raises(ValueError, match=ENV_PRETTY):
        resolve_settings(environ={ENV_PRETTY: "maybe"})


def test_invalid_error_environment():
    with pytest.raises(ValueError, match=ENV_ERROR):
        resolve_settings(environ={ENV_ERROR: "loud"})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv(ENV_PRETTY, "1")
    assert resolve_settings().pretty is True
