"""Reads logical lines from vCard/iCalendar text, unfolding as it goes.

WHY: The property parser consumes one property per line, but writers fold
long properties over several physical lines. This module is the single
place that turns physical lines back into logical ones, while keeping
track of line numbers so parse errors can point at the right place in the
source file.

HOW: FoldedLineReader pulls physical lines from the wrapped stream. The
first physical line of each logical line goes through detect_fold_mode();
the matching assembler then keeps reading continuation lines:

  STANDARD          : skip blank lines, append lines that start with a
                      space or tab (minus that one character), and park
                      the first non-continuation line in a one-line
                      lookahead slot for the next call.
  QUOTED_PRINTABLE  : read raw lines (blank lines included), strip one
                      optional leading space or tab, and keep going while
                      the line ends with "=". The first line without a
                      trailing "=" is the last one; no lookahead.

RULES:
- Every physical line consumed is counted, blank or not, in both modes
- line_number is fixed when a logical line's first physical line is read
  and never changes while unfolding
- Blank lines are skipped in STANDARD mode only (iPhone vCards put them
  between folded lines); in QUOTED_PRINTABLE mode they are content
- End of stream in the middle of a fold ends the logical line; no error
- Errors raised by the stream propagate untouched and no partial logical
  line is returned
- Not thread-safe; one reader per stream
"""

from __future__ import annotations

import codecs
import io
import logging
from typing import Iterator, List, Optional, TextIO, Tuple, Union

from folded_lines.core.fold_style import (
    QP_SOFT_BREAK,
    FoldMode,
    chop,
    detect_fold_mode,
    is_folded_line,
)
from folded_lines.core.models import LogicalLine

logger = logging.getLogger(__name__)


def _strip_terminator(raw: str) -> str:
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith(("\n", "\r")):
        return raw[:-1]
    return raw


def _stream_encoding(stream: TextIO) -> Optional[str]:
    """Return the normalized codec name of ``stream``, or None if unknown.

    io.TextIOWrapper (open(), sys.stdin) reports an encoding; io.StringIO
    and most file-likes report None or nothing at all.
    """
    name = getattr(stream, "encoding", None)
    if not name:
        return None
    try:
        return codecs.lookup(name).name
    except LookupError:
        logger.debug("Unknown stream encoding %r, leaving it unset", name)
        return None


class FoldedLineReader:
    """Reads unfolded logical lines from a text stream or a string.

    WHY: vCard 2.1/3.0/4.0 and iCalendar all fold long lines, and some
    writers do it wrong. Callers should not need to care which flavour a
    file uses.

    HOW: Wrap the input once and call read_line() until it returns None,
    or iterate the reader. line_number tells where the most recently
    returned logical line started.

    RULES:
    - A str source is read as text with universal newlines
    - bytes are rejected; decode them (or wrap in io.TextIOWrapper) first
    - The reader closes the stream when used as a context manager

    Args:
        source: The text to read, or a text stream with a readline() method.

    Raises:
        TypeError: If source is bytes-like or has no readline() method.
    """

    def __init__(self, source: Union[str, TextIO]) -> None:
        if isinstance(source, str):
            stream: TextIO = io.StringIO(source, newline=None)
        elif isinstance(source, (bytes, bytearray, memoryview)):
            raise TypeError(
                "FoldedLineReader reads text, not bytes; "
                "decode the data or wrap the stream in io.TextIOWrapper"
            )
        elif callable(getattr(source, "readline", None)):
            stream = source
        else:
            raise TypeError(
                "Expected a str or a text stream, got {}".format(type(source).__name__)
            )

        self._stream = stream
        self._encoding = _stream_encoding(stream)
        self._lookahead: Optional[Tuple[str, int]] = None
        self._line_count = 0
        self._line_number = 0

    @property
    def line_number(self) -> int:
        """Physical line number (1-based) where the last logical line started.

        0 until the first logical line has been read.
        """
        return self._line_number

    @property
    def encoding(self) -> Optional[str]:
        """Codec name of the wrapped stream, or None if it has none."""
        return self._encoding

    @property
    def closed(self) -> bool:
        return bool(getattr(self._stream, "closed", False))

    # ------------------------------------------------------------------
    # Physical lines
    # ------------------------------------------------------------------

    def _read_physical_line(self) -> Optional[str]:
        """Read one raw physical line, or None at end of stream."""
        raw = self._stream.readline()
        if raw == "":
            return None
        self._line_count += 1
        return _strip_terminator(raw)

    def _read_non_empty_line(self) -> Optional[str]:
        """Read the next physical line that is not blank, or None at end of stream.

        Blank lines are consumed and counted but never returned.
        """
        while True:
            line = self._read_physical_line()
            if line is None or line:
                return line

    # ------------------------------------------------------------------
    # Logical lines
    # ------------------------------------------------------------------

    def read_line(self) -> Optional[str]:
        """Read the next unfolded logical line.

        Returns:
            The logical line without its line terminator, or None once the
            end of the stream has been reached (and on every call after).

        Raises:
            Whatever the wrapped stream raises (OSError,
            UnicodeDecodeError, ...). The logical line being assembled is
            discarded.
        """
        if self._lookahead is not None:
            first, first_number = self._lookahead
            self._lookahead = None
        else:
            first = self._read_non_empty_line()
            if first is None:
                return None
            first_number = self._line_count

        mode = detect_fold_mode(first)
        self._line_number = first_number

        if mode is FoldMode.QUOTED_PRINTABLE:
            logger.debug("Line %d: QUOTED-PRINTABLE soft-break folding", first_number)
            return self._unfold_quoted_printable(chop(first))
        return self._unfold_standard(first)

    def _unfold_standard(self, first: str) -> str:
        parts = [first]
        while True:
            line = self._read_non_empty_line()
            if line is None:
                break

            if is_folded_line(line):
                parts.append(line[1:])
                continue

            self._lookahead = (line, self._line_count)
            break

        return "".join(parts)

    def _unfold_quoted_printable(self, first: str) -> str:
        parts = [first]
        while True:
            line = self._read_physical_line()
            if line is None:
                logger.debug(
                    "Line %d: stream ended inside a QUOTED-PRINTABLE fold",
                    self._line_number,
                )
                break

            # some writers still indent the continuation lines
            if is_folded_line(line):
                line = line[1:]

            if line.endswith(QP_SOFT_BREAK):
                parts.append(chop(line))
                continue

            parts.append(line)
            break

        return "".join(parts)

    def numbered(self) -> Iterator[LogicalLine]:
        """Yield every remaining logical line with its starting line number."""
        while True:
            text = self.read_line()
            if text is None:
                return
            yield LogicalLine(line_number=self._line_number, text=text)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line

    def close(self) -> None:
        """Close the wrapped stream."""
        self._stream.close()

    def __enter__(self) -> "FoldedLineReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def unfold(text: str) -> List[str]:
    """Return all logical lines of ``text``, unfolded."""
    with FoldedLineReader(text) as reader:
        return list(reader)
