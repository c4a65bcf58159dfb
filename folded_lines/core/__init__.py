"""Core unfolding modules.

WHY: The core package is the whole unfolding algorithm, the part every
consumer (property parser, CLI, tests) depends on.

HOW: fold_style.py decides which folding convention the first physical
line of a logical line uses, reader.py runs the unfolding loop over a
stream, models.py holds the small value type handed to callers.

RULES:
- No I/O setup here beyond wrapping a literal string in a StringIO
- No knowledge of vCard/iCalendar property structure beyond the
  QUOTED-PRINTABLE fold marker
"""
