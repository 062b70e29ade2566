"""CLI helper utilities: error reporting and logging setup."""

import json
import logging
import sys
from typing import Optional, TextIO

import click

from ..models.errors import YamlError
from ..models.options import ErrorStyle


class ErrorPrinter:
    """Report errors in the configured ``ErrorStyle``.

    - silent: errors are dropped
    - stderr: one line per error on stderr
    - json: a ``{"yaml-error": "..."}`` object on stdout, in the same stream
      as the converted documents
    """

    def __init__(
        self,
        print_style: ErrorStyle = ErrorStyle.STDERR,
        pretty: bool = False,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.print_style = print_style
        self.pretty = pretty
        self._stdout = stdout
        self._stderr = stderr

    def format_json(self, message: str) -> str:
        payload = YamlError(message=message).model_dump(by_alias=True)
        if self.pretty:
            return json.dumps(payload, indent=2, ensure_ascii=False)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    def print(self, message: str) -> None:
        if self.print_style is ErrorStyle.SILENT:
            return
        if self.print_style is ErrorStyle.STDERR:
            click.echo(message, file=self._stderr or sys.stderr)
        else:
            click.echo(self.format_json(message), file=self._stdout or sys.stdout)


def configure_logging(verbose: bool = False) -> None:
    """Send yaml2json log records to stderr, at DEBUG when ``verbose`` is set.

    Only the ``yaml2json`` logger is configured; the root logger is left to
    the embedding application.
    """
    logger = logging.getLogger("yaml2json")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(name)s: %(levelname)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
