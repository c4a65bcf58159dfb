"""Value types returned by the folded line reader.

WHY: read_line() returns bare strings, which is all a property parser
needs. Diagnostics and the CLI also want to know where each logical line
started, so numbered() pairs the two.

RULES:
- line_number is 1-based and counts blank physical lines
- text is the unfolded content, fold markers already removed
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class LogicalLine:
    """One unfolded logical line and the physical line it started on."""

    line_number: int
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
