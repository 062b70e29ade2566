"""Unit tests for ErrorPrinter styles."""

import io
import json

from yaml2json.cli.helpers import ErrorPrinter
from yaml2json.models import ErrorStyle, YamlError


def _streams():
    return io.StringIO(), io.StringIO()


def test_silent_prints_nothing():
    out, err = _streams()
    ErrorPrinter(ErrorStyle.SILENT, stdout=out, stderr=err).print("boom")
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_stderr_prints_message_line():
    out, err = _streams()
    ErrorPrinter(ErrorStyle.STDERR, stdout=out, stderr=err).print("boom")
    assert out.getvalue() == ""
    assert err.getvalue() == "boom\n"


def test_json_compact():
    out, err = _streams()
    ErrorPrinter(ErrorStyle.JSON, stdout=out, stderr=err).print("boom")
    assert out.getvalue() == '{"yaml-error":"boom"}\n'
    assert err.getvalue() == ""


def test_json_pretty():
    out, err = _streams()
    ErrorPrinter(ErrorStyle.JSON, pretty=True, stdout=out, stderr=err).print(
        "boom"
    )
    assert out.getvalue() == '{\n  "yaml-error": "boom"\n}\n'


def test_json_message_is_escaped():
    out, err = _streams()
    message = 'found "quotes"\n  in "<unicode string>", line 1'
    ErrorPrinter(ErrorStyle.JSON, stdout=out, stderr=err).print(message)
    assert json.loads(out.getvalue()) == {"yaml-error": message}


def test_yaml_error_model_alias():
    err = YamlError(message="boom")
    assert err.model_dump(by_alias=True) == {"yaml-error": "boom"}
    assert str(err) == "boom"
    assert YamlError.model_validate({"yaml-error": "x"}).message == "x"
