"""Shared test fixtures for the folded_lines test suite.

WHY: Several test modules need the same folded vCards: one RFC-folded
card with the blank lines iPhones leave between continuation lines, and
one Outlook card with QUOTED-PRINTABLE soft-break folding.

HOW: Module-level constants hold the physical lines; fixtures join them
with the terminator under test and write files for CLI tests.

RULES:
- Physical lines are listed one per entry so line numbers in tests can be
  read straight off the list (index + 1).
"""

from typing import List

import pytest


# ---------------------------------------------------------------------------
# RFC folding, with blank lines between continuation lines
# ---------------------------------------------------------------------------

IPHONE_VCARD_LINES: List[str] = [
    "BEGIN:VCARD",                            # 1
    "VERSION:3.0",                            # 2
    "N:Doe;John;;;",                          # 3
    "NOTE:This is a long note that was fol",  # 4
    "",                                       # 5
    " ded by the writer and then pa",         # 6
    "",                                       # 7
    "\tdded with blank lines.",               # 8
    "EMAIL;TYPE=INTERNET:john@example.com",   # 9
    "END:VCARD",                              # 10
]

IPHONE_VCARD_LOGICAL = [
    (1, "BEGIN:VCARD"),
    (2, "VERSION:3.0"),
    (3, "N:Doe;John;;;"),
    (4, "NOTE:This is a long note that was folded by the writer and then padded with blank lines."),
    (9, "EMAIL;TYPE=INTERNET:john@example.com"),
    (10, "END:VCARD"),
]


# ---------------------------------------------------------------------------
# Outlook QUOTED-PRINTABLE soft-break folding
# ---------------------------------------------------------------------------

OUTLOOK_VCARD_LINES: List[str] = [
    "BEGIN:VCARD",                                 # 1
    "VERSION:2.1",                                 # 2
    "NOTE;QUOTED-PRINTABLE: This is an=0D=0A=",    # 3
    "annoyingly formatted=0D=0A=",                 # 4
    "note=",                                       # 5
    "",                                            # 6
    "END:VCARD",                                   # 7
]

OUTLOOK_VCARD_LOGICAL = [
    (1, "BEGIN:VCARD"),
    (2, "VERSION:2.1"),
    (3, "NOTE;QUOTED-PRINTABLE: This is an=0D=0Aannoyingly formatted=0D=0Anote"),
    (7, "END:VCARD"),
]


@pytest.fixture
def iphone_vcard() -> str:
    """RFC-folded vCard with blank lines between folds, CRLF terminated."""
    return "\r\n".join(IPHONE_VCARD_LINES) + "\r\n"


@pytest.fixture
def outlook_vcard() -> str:
    """Outlook vCard 2.1 with a soft-break folded QUOTED-PRINTABLE note."""
    return "\r\n".join(OUTLOOK_VCARD_LINES) + "\r\n"


@pytest.fixture
def iphone_vcard_file(tmp_path, iphone_vcard):
    path = tmp_path / "contact.vcf"
    path.write_bytes(iphone_vcard.encode("utf-8"))
    return path


@pytest.fixture
def iphone_vcard_logical():
    """Expected (line_number, text) pairs for iphone_vcard."""
    return list(IPHONE_VCARD_LOGICAL)


@pytest.fixture
def outlook_vcard_logical():
    """Expected (line_number, text) pairs for outlook_vcard."""
    return list(OUTLOOK_VCARD_LOGICAL)
