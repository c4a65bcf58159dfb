"""Command-line interface for inspecting unfolded vCard/iCalendar files.

WHY: When a property parser chokes on a file, the first question is what
the unfolded lines actually look like and where each one started. This
tool prints exactly what FoldedLineReader hands to a parser.

HOW: Uses argparse to accept an input file (or "-" for stdin), the input
encoding and an output style. Opens the file, runs FoldedLineReader over
it and writes logical lines to stdout: plain, prefixed with their starting
line number (--numbers), or as JSON lines (--json) validated against
schemas/logical_line.schema.json with jsonschema.

RULES:
- Positional argument: input file path, or "-" for stdin
- --encoding defaults to FOLDED_LINES_ENCODING (utf-8)
- --numbers and --json are mutually exclusive
- Logical lines go to stdout; errors go to stderr
- Exit codes: 0 success, 1 unreadable input or bad option, 130 Ctrl-C
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

import jsonschema

from folded_lines import __version__
from folded_lines.config import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    resolve_log_level,
)
from folded_lines.core.models import LogicalLine
from folded_lines.core.reader import FoldedLineReader

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "logical_line.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def format_line(line: LogicalLine, style: str) -> str:
    """Render one logical line for output.

    RULES:
    - "plain": the text only
    - "numbers": "<line_number>: <text>"
    - "json": compact JSON object, validated against the schema first

    Raises:
        jsonschema.ValidationError: If the JSON object does not match the schema.
        ValueError: If style is unknown.
    """
    if style == "plain":
        return line.text
    if style == "numbers":
        return "{}: {}".format(line.line_number, line.text)
    if style == "json":
        payload = line.to_dict()
        jsonschema.validate(instance=payload, schema=_get_schema())
        return json.dumps(payload, ensure_ascii=False)
    raise ValueError("Unknown output style '{}'".format(style))


def _open_input(path: str, encoding: str) -> TextIO:
    if path == "-":
        return io.TextIOWrapper(sys.stdin.buffer, encoding=encoding)
    return open(path, encoding=encoding, newline="")


def dump(reader: FoldedLineReader, out: TextIO, style: str = "plain") -> int:
    """Write every logical line from ``reader`` to ``out``; return how many."""
    count = 0
    for line in reader.numbered():
        out.write(format_line(line, style))
        out.write("\n")
        count += 1
    return count


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="folded-lines",
        description="Print the unfolded logical lines of a vCard or iCalendar file.",
    )

    parser.add_argument(
        "input_file",
        help='Path to the file to unfold, or "-" to read stdin.',
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Character encoding of the input (default: %(default)s).",
    )

    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "--numbers",
        dest="style",
        action="store_const",
        const="numbers",
        help="Prefix each logical line with the line number it starts on.",
    )
    style.add_argument(
        "--json",
        dest="style",
        action="store_const",
        const="json",
        help="Print one JSON object per logical line.",
    )
    parser.set_defaults(style="plain")

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help="Logging level for diagnostics on stderr (default: %(default)s).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``folded-lines`` and ``python -m folded_lines``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = resolve_log_level(args.log_level)
    except ValueError as e:
        _error(str(e))
        sys.exit(1)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    if args.input_file != "-" and not Path(args.input_file).is_file():
        _error("File not found: {}".format(args.input_file))
        sys.exit(1)

    try:
        stream = _open_input(args.input_file, args.encoding)
    except LookupError:
        _error("Unknown encoding '{}'".format(args.encoding))
        sys.exit(1)
    except OSError as e:
        _error(str(e))
        sys.exit(1)

    try:
        with FoldedLineReader(stream) as reader:
            count = dump(reader, sys.stdout, args.style)
    except KeyboardInterrupt:
        _error("Cancelled by user.")
        sys.exit(130)
    except UnicodeDecodeError as e:
        _error("Could not decode {} as {}: {}".format(args.input_file, args.encoding, e))
        sys.exit(1)
    except OSError as e:
        _error(str(e))
        sys.exit(1)

    logger.info("Read %d logical line(s) from %s", count, args.input_file)


if __name__ == "__main__":
    main()
