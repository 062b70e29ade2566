"""Output options shared by the converter and the CLI."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Style(Enum):
    """JSON output style."""

    COMPACT = "compact"  # {"hello":"world"}
    PRETTY = "pretty"  # two-space indent, one member per line


class ErrorStyle(Enum):
    """Where conversion and file errors are reported."""

    SILENT = "silent"
    STDERR = "stderr"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "ErrorStyle":
        """Parse an error style name, accepting ``none`` for ``silent``."""

        normalized = value.strip().lower()
        if normalized == "none":
            return cls.SILENT
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(
                f"not a valid error style: {value!r} (choose from {choices})"
            ) from None


class Settings(BaseModel):
    """Resolved command line settings."""

    style: Style = Style.COMPACT
    error_style: ErrorStyle = ErrorStyle.STDERR
    verbose: bool = False

    @property
    def pretty(self) -> bool:
        return self.style is Style.PRETTY


__all__ = ["ErrorStyle", "Settings", "Style"]
