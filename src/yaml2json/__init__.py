"""yaml2json: convert (multi-document) YAML streams to JSON."""

__version__ = "0.1.0"

from .core.convert import Yaml2Json
from .core.split import DocumentIterator, split_documents
from .errors import ConversionError, Yaml2JsonError, YamlSplitError
from .models.options import ErrorStyle, Style

__all__ = [
    "__version__",
    "ConversionError",
    "DocumentIterator",
    "ErrorStyle",
    "Style",
    "Yaml2Json",
    "Yaml2JsonError",
    "YamlSplitError",
    "split_documents",
]
