"""Configuration defaults and .env loading for the folded-lines tools.

WHY: The reader itself needs no configuration, but the command-line tool
has to pick an input encoding and a log level. Keeping those in one place
lets users set them once in a .env file instead of passing flags on every
run.

HOW: python-dotenv loads the .env file on import. Constants are read from
the environment with plain defaults. resolve_log_level() turns a level
name into a logging level with a clear error for typos.

RULES:
- FOLDED_LINES_ENCODING: input encoding for files read by the CLI
  (default utf-8; vCard 2.1 files from old phones are often cp1252)
- FOLDED_LINES_LOG_LEVEL: log level name for the CLI (default WARNING)
- Nothing here changes how lines are unfolded
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the directory the tool is run from
load_dotenv()

DEFAULT_ENCODING = os.getenv("FOLDED_LINES_ENCODING", "utf-8")
DEFAULT_LOG_LEVEL = os.getenv("FOLDED_LINES_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_log_level(name: str) -> int:
    """Map a log level name to its ``logging`` constant.

    RULES:
    - Case-insensitive, surrounding whitespace ignored
    - Raises ValueError for unknown names, listing the valid ones
    """
    level = _LOG_LEVELS.get(name.strip().upper())
    if level is None:
        raise ValueError(
            "Unknown log level '{}'. Expected one of: {}".format(
                name, ", ".join(_LOG_LEVELS)
            )
        )
    return level
