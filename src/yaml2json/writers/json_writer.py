"""Write converted YAML documents to a JSON output stream."""

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from ..cli.helpers import ErrorPrinter
from ..core.convert import Yaml2Json
from ..errors import ConversionError

logger = logging.getLogger(__name__)


@dataclass
class WriteSummary:
    """Counts for one input stream."""

    documents: int = 0
    errors: int = 0


def write_documents(
    documents: Iterable[str],
    converter: Yaml2Json,
    printer: ErrorPrinter,
    output: Optional[TextIO] = None,
) -> WriteSummary:
    """Convert each document and write the JSON to ``output``.

    Args:
        documents: YAML documents, usually a ``DocumentIterator``
        converter: Converter configured with the output style
        printer: ``ErrorPrinter`` that reports conversion errors
        output: Output stream, or None for stdout

    Returns:
        WriteSummary with converted and failed document counts

    Raises:
        YamlSplitError: If reading the input stream fails. Output already
            written stays written; no final newline is added.

    Notes:
        - Successful outputs are separated by a newline and the last one is
          followed by a newline
        - A failed document is reported and skipped; later documents are
          still converted
    """
    output = output or sys.stdout
    summary = WriteSummary()
    printed_last = False

    for index, document in enumerate(documents, start=1):
        if printed_last:
            output.write("\n")
        printed_last = False

        try:
            converter.document_to_writer(document, output)
        except ConversionError as e:
            logger.debug("Document %d failed to convert: %s", index, e)
            summary.errors += 1
            printer.print(str(e))
            continue

        summary.documents += 1
        printed_last = True

    if printed_last:
        output.write("\n")
    output.flush()
    return summary
