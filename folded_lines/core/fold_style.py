"""Fold-style detection for the first line of a logical line.

WHY: Two folding conventions show up in real vCards. RFC folding marks a
continuation with one leading space or tab. Outlook's QUOTED-PRINTABLE
values instead end each physical line with "=" and put no whitespace on the
next one, so the RFC rule alone would split the value into garbage
properties. The two conventions terminate differently and must never be
mixed within one logical line, so the reader picks one up front.

HOW: A single full-line regex tests the first physical line. If the text
before the first colon contains QUOTED-PRINTABLE and the line ends with
"=", the logical line is in QUOTED_PRINTABLE mode; otherwise STANDARD.

Example of the quirk (the blank line above END is still part of NOTE,
because the line before it ends with "="):

    BEGIN:VCARD
    NOTE;QUOTED-PRINTABLE: This is an=0D=0A=
    annoyingly formatted=0D=0A=
    note=

    END:VCARD

RULES:
- Matching is case-insensitive and anchored to the whole line
- QUOTED-PRINTABLE must appear before the first colon
- Past the QUOTED-PRINTABLE token, a line terminator character (including
  U+0085, U+2028 and U+2029) never matches, so such a line stays STANDARD
- A folded line starts with exactly one space or tab; an empty line is
  never folded
"""

from __future__ import annotations

import enum
import re

FOLD_WHITESPACE = (" ", "\t")
QP_SOFT_BREAK = "="

# any character except a line terminator (\n \r \x85 \u2028 \u2029)
_NOT_EOL = r"[^\n\r\x85\u2028\u2029]"

FOLDED_QUOTED_PRINTABLE_RE = re.compile(
    r"[^:]*?QUOTED-PRINTABLE{0}*?:{0}*?=".format(_NOT_EOL), re.IGNORECASE
)


class FoldMode(enum.Enum):
    """Folding convention used by one logical line."""

    STANDARD = "standard"
    QUOTED_PRINTABLE = "quoted-printable"


def is_folded_quoted_printable(line: str) -> bool:
    """True if ``line`` opens an Outlook-style folded QUOTED-PRINTABLE value."""
    return FOLDED_QUOTED_PRINTABLE_RE.fullmatch(line) is not None


def detect_fold_mode(line: str) -> FoldMode:
    """Pick the folding convention for the logical line that starts with ``line``."""
    if is_folded_quoted_printable(line):
        return FoldMode.QUOTED_PRINTABLE
    return FoldMode.STANDARD


def is_folded_line(line: str) -> bool:
    """True if ``line`` is an RFC continuation (leading space or tab)."""
    return line[:1] in FOLD_WHITESPACE


def chop(text: str) -> str:
    """Remove the last character of ``text``; an empty string stays empty."""
    return text[:-1]
