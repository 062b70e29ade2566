"""Pydantic models and enums for yaml2json options and error payloads."""

from .errors import YamlError
from .options import ErrorStyle, Settings, Style

__all__ = ["ErrorStyle", "Settings", "Style", "YamlError"]
