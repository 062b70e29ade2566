"""yaml2json exceptions."""


class Yaml2JsonError(Exception):
    """Base class for yaml2json errors."""


class YamlSplitError(Yaml2JsonError):
    """Reading the underlying stream failed while splitting documents.

    The original ``OSError`` or ``UnicodeDecodeError`` is kept as
    ``__cause__``.
    """


class ConversionError(Yaml2JsonError):
    """A single YAML document could not be converted to JSON."""


__all__ = ["ConversionError", "Yaml2JsonError", "YamlSplitError"]
