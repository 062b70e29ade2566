"""Convert single YAML documents to JSON."""

import base64
import datetime
import json
import math
from typing import Any, TextIO

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConversionError
from ..models.options import Style


def _normalize_key(key: Any) -> Any:
    # json handles these key types itself (true, null, 1.5, ...)
    if key is None or isinstance(key, (str, int, float)):
        return key
    value = _normalize(key)
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _normalize(value: Any) -> Any:
    """Map values without a JSON counterpart onto JSON types."""
    if isinstance(value, dict):
        return {_normalize_key(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [_normalize(item) for item in value]
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


class Yaml2Json:
    """Convert individual YAML documents into JSON text.

    Each instance is configured with one output ``Style``:

        >>> Yaml2Json(Style.COMPACT).document_to_string("hello: world")
        '{"hello":"world"}'
        >>> print(Yaml2Json(Style.PRETTY).document_to_string("hello: world"))
        {
          "hello": "world"
        }

    Documents must contain exactly one YAML document; use
    ``DocumentIterator`` to split multi-document streams first.
    """

    def __init__(self, style: Style = Style.COMPACT):
        self.style = style
        self._yaml = YAML(typ="safe", pure=True)

    def load(self, document: str) -> Any:
        """Parse a YAML document into plain JSON-compatible Python values."""
        try:
            data = self._yaml.load(document)
        except (YAMLError, ValueError, TypeError) as e:
            raise ConversionError(str(e)) from e
        return _normalize(data)

    def dumps(self, value: Any) -> str:
        """Serialize an already loaded value in this instance's style."""
        try:
            if self.style is Style.PRETTY:
                return json.dumps(value, indent=2, ensure_ascii=False)
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ConversionError(str(e)) from e

    def document_to_string(self, document: str) -> str:
        """Convert a YAML document to a JSON string without a trailing newline.

        Raises:
            ConversionError: If the document is not valid YAML or holds a
                value that cannot be represented as JSON.
        """
        return self.dumps(self.load(document))

    def document_to_writer(self, document: str, stream: TextIO) -> None:
        """Convert a YAML document and write the JSON to ``stream``.

        Nothing is written when conversion fails.
        """
        stream.write(self.document_to_string(document))
