"""Logging setup for the prstats CLI.

Records always go to stderr; stdout carries only the summary line or the
JSON/CSV export. Level and format come from config.yaml (logging.level,
logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT); --quiet raises the
level to WARNING so only suspicious data and failures are reported.
"""

import logging
import sys
from typing import TextIO

from prstats.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_LEVEL = logging.WARNING

# Connection pool messages from requests' transport; shown only at DEBUG.
TRANSPORT_LOGGER = "urllib3"


def resolve_level(level: str, quiet: bool = False) -> int:
    """Map a level name to a logging constant (unknown -> INFO).

    With quiet, the result is never below WARNING.
    """
    resolved = LEVELS.get((level or "").upper().strip(), logging.INFO)
    if quiet:
        return max(resolved, QUIET_LEVEL)
    return resolved


def setup_logging(config: LoggingConfig, quiet: bool = False, stream: TextIO | None = None) -> None:
    """Configure the root logger for one CLI run."""
    level = resolve_level(config.level, quiet)
    logging.basicConfig(
        level=level,
        format=config.format or DEFAULT_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )
    logging.getLogger(TRANSPORT_LOGGER).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
