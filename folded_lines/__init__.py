"""Folded line reader for vCard and iCalendar text.

WHY: vCard and iCalendar writers split long properties across several
physical lines ("folding"). A property parser wants one logical line per
property, so something has to glue the pieces back together before
tokenizing. Some writers (Outlook) also fold QUOTED-PRINTABLE values in a
non-standard way that a plain RFC unfolder gets wrong.

HOW: FoldedLineReader wraps a text stream (or a string) and hands out one
unfolded logical line per read_line() call, remembering the physical line
number each logical line started on for diagnostics.

RULES:
- Unfolding only; no folding, property parsing or value decoding
- The reader never decodes bytes; callers pass text streams or strings
- Everything importable from here is the public API
"""

from folded_lines.core.fold_style import FoldMode, detect_fold_mode, is_folded_quoted_printable
from folded_lines.core.models import LogicalLine
from folded_lines.core.reader import FoldedLineReader, unfold

__version__ = "0.1.0"

__all__ = [
    "FoldMode",
    "FoldedLineReader",
    "LogicalLine",
    "detect_fold_mode",
    "is_folded_quoted_printable",
    "unfold",
]
