"""Split a multi-document YAML stream into individual documents.

Single-document YAML parsers reject streams such as::

    hello: world
    ---
    hello: python

``DocumentIterator`` reads the stream line by line and yields the exact text
of each document, suitable for passing to a single-document parser:

- ``"hello: world\\n"``
- ``"---\\nhello: python\\n"``

The directives end marker (``---``) belongs to the document it opens.
Document end markers (``...``) are consumed and never appear in any
document. Directives (``%YAML 1.2``) stay with the document they precede.
"""

import io
import logging
from dataclasses import dataclass
from typing import IO, Iterator, List, Optional, Union

from ..errors import YamlSplitError

logger = logging.getLogger(__name__)

DIRECTIVES_END = "---"
DOCUMENT_END = "..."

Source = Union[str, bytes, bytearray, IO[str], IO[bytes]]


@dataclass
class SplitterState:
    """Scan state carried between documents."""

    disambiguated: bool = False
    """Whether the current document is known to open with a header or content."""

    in_header: bool = False
    """Whether directive lines are being scanned rather than document content."""

    pending_line: Optional[str] = None
    """A ``---`` line already read that opens the next document."""


def classify_line(line: str) -> Optional[bool]:
    """Classify a line by its first non-whitespace character.

    Returns:
        True if the line starts a directive (``%``), False if it is document
        content, or None if it is blank or a comment and says nothing.
    """
    for char in line:
        if char in " \t\r":
            continue
        if char in "#\n":
            return None
        return char == "%"
    return None


def _wrap_source(source: Source) -> IO:
    if isinstance(source, str):
        # StringIO's default newline="\n" splits on \n only and keeps \r\n intact
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    if not hasattr(source, "readline"):
        raise TypeError(
            f"expected str, bytes or a readable stream, got {type(source).__name__}"
        )
    return source


class DocumentIterator:
    """Lazily yield the YAML documents found in a stream.

    The iterator pulls lines on demand and buffers only the document being
    assembled, plus at most one line that belongs to the next document. It
    cannot be restarted: once the stream is exhausted, or reading it failed,
    every further ``next()`` raises ``StopIteration``.

    Args:
        source: YAML text, UTF-8 encoded bytes, or a stream opened for
            reading. Binary streams are decoded as UTF-8. Text streams should
            be opened with ``newline=""`` if carriage returns must survive.

    Raises:
        YamlSplitError: From ``next()`` when the stream cannot be read or is
            not valid UTF-8.

    Example:
        >>> list(DocumentIterator("a: 1\\n---\\nb: 2\\n"))
        ['a: 1\\n', '---\\nb: 2\\n']
    """

    def __init__(self, source: Source):
        self._stream = _wrap_source(source)
        self._exhausted = False
        self.state = SplitterState()

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._exhausted:
            raise StopIteration

        try:
            document = self._next_document()
        except YamlSplitError:
            self._exhausted = True
            raise

        if document is None:
            self._exhausted = True
            raise StopIteration
        return document

    def _readline(self) -> str:
        try:
            line = self._stream.readline()
        except OSError as exc:
            logger.debug("Reading YAML stream failed: %s", exc)
            raise YamlSplitError(f"failed to read YAML stream: {exc}") from exc

        if isinstance(line, (bytes, bytearray)):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.debug("YAML stream is not valid UTF-8: %s", exc)
                raise YamlSplitError(
                    f"stream did not contain valid UTF-8: {exc}"
                ) from exc
        return line

    def _disambiguate(self, line: str) -> None:
        kind = classify_line(line)
        if kind is None:
            return
        self.state.disambiguated = True
        if kind:
            self.state.in_header = True
        elif line.startswith(DIRECTIVES_END):
            self.state.in_header = False
        # Other content keeps in_header: after "..." the header stays open
        # until a "---" line closes it.

    def _next_document(self) -> Optional[str]:
        state = self.state
        parts: List[str] = []

        if state.pending_line is not None:
            parts.append(state.pending_line)
            state.pending_line = None
            self._disambiguate(parts[0])

        # Header disambiguation: blank and comment lines are kept but say
        # nothing; the first other line decides between directives and content.
        while not state.disambiguated:
            line = self._readline()
            if not line:
                if parts:
                    logger.debug(
                        "Dropping %d trailing blank/comment line(s)", len(parts)
                    )
                return None
            self._disambiguate(line)
            parts.append(line)

        # Boundary scanning
        while True:
            line = self._readline()

            if not line:
                if not parts:
                    return None
                logger.debug("Document ended at end of stream")
                return self._finish(parts)

            if line.startswith(DIRECTIVES_END):
                if not state.in_header:
                    # Opens the next document; carry it over.
                    state.pending_line = line
                    logger.debug("Document ended by directives end marker")
                    return self._finish(parts)
                state.in_header = False
            elif line.startswith(DOCUMENT_END):
                state.in_header = True
                logger.debug("Document ended by document end marker")
                return self._finish(parts)

            parts.append(line)

    def _finish(self, parts: List[str]) -> str:
        self.state.disambiguated = False
        return "".join(parts)


def split_documents(source: Source) -> List[str]:
    """Split ``source`` into a list of YAML documents.

    Example:
        >>> split_documents("%YAML 1.2\\n---\\na: 1\\n...\\n")
        ['%YAML 1.2\\n---\\na: 1\\n']
    """
    return list(DocumentIterator(source))
