"""yaml2json CLI main entry point."""

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import click

from .. import __version__
from ..context import Yaml2JsonContext, resolve_settings
from ..core.convert import Yaml2Json
from ..core.split import DocumentIterator
from ..errors import YamlSplitError
from ..models.options import ErrorStyle
from ..writers import write_documents
from .helpers import ErrorPrinter, configure_logging

logger = logging.getLogger(__name__)

ERROR_CHOICES = [style.value for style in ErrorStyle] + ["none"]


def _convert_stream(obj: Yaml2JsonContext, stream: BinaryIO, name: str) -> None:
    summary = write_documents(
        DocumentIterator(stream), obj.converter, obj.printer, sys.stdout
    )
    logger.debug(
        "%s: %d document(s) converted, %d error(s)",
        name,
        summary.documents,
        summary.errors,
    )


def _convert_file(obj: Yaml2JsonContext, name: str) -> None:
    path = Path(name)

    if not path.exists():
        obj.printer.print(f"file {name} does not exist")
        return
    if path.is_dir():
        obj.printer.print(f"{name} is a directory")
        return

    try:
        stream = open(path, "rb")
    except OSError as e:
        obj.printer.print(str(e))
        return

    logger.debug("Reading %s", name)
    with stream:
        _convert_stream(obj, stream, name)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("files", nargs=-1)
@click.option(
    "-p",
    "--pretty",
    is_flag=True,
    help="Pretty-print JSON output (also $YAML2JSON_PRETTY)",
)
@click.option(
    "-e",
    "--error",
    type=click.Choice(ERROR_CHOICES, case_sensitive=False),
    default=None,
    help="How to report errors (also $YAML2JSON_ERROR) [default: stderr]",
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Log debug information to stderr"
)
@click.version_option(__version__, prog_name="yaml2json")
@click.pass_context
def cli(ctx, files, pretty, error, verbose):
    """Convert YAML documents to JSON.

    Every document in every FILE is converted to one JSON value per line.
    Multi-document files (separated by --- or ended by ...) are supported.
    With no FILE, read standard input.

    Examples:
        yaml2json file1.yaml file2.yaml

        cat file1.yaml | yaml2json

        yaml2json --error=json file1.yaml | jq
    """
    try:
        settings = resolve_settings(pretty=pretty, error=error, verbose=verbose)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    configure_logging(settings.verbose)

    obj = ctx.ensure_object(Yaml2JsonContext)
    obj.settings = settings
    obj.converter = Yaml2Json(settings.style)
    obj.printer = ErrorPrinter(settings.error_style, settings.pretty)

    try:
        if files:
            for name in files:
                _convert_file(obj, name)
        else:
            stdin = click.get_binary_stream("stdin")
            _convert_stream(obj, stdin, "<stdin>")
    except YamlSplitError as e:
        if settings.error_style is not ErrorStyle.SILENT:
            click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        # stdout is gone (e.g. closed pipe); nothing more can be written
        logger.debug("Writing output failed: %s", e)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
