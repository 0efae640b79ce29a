"""Append-only run log written into the scanned root.

Each non-preview run that deletes something appends one section:

    Cleaned on: 2026-Oct-16 21:04:11
    ---------------------------------------
      /media/TV/Show/Season 1/Show.S01E01.nfo
    ---------------------------------------

followed by two blank lines.

The log is human-readable only and never parsed back.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "cleanLog.log"
LOG_HEADER = "Cleaned on:"
TIMESTAMP_FORMAT = "%Y-%b-%d %H:%M:%S"
SEPARATOR = "-" * 39
ITEM_INDENT = "  "


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp as ``yyyy-MMM-dd HH:mm:ss``."""
    return moment.strftime(TIMESTAMP_FORMAT)


class RunLogger:
    """Writes run sections to a log file.

    Args:
        clock: Callable returning the current local time. Defaults to
            ``datetime.now``.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now

    def append_run(self, log_file_path: str | Path, header: str, items: Sequence[str]) -> None:
        """Append one section listing ``items`` to the log file.

        Nothing is written when ``items`` is empty.

        Args:
            log_file_path: Log file to append to (created if missing).
            header: Human label placed before the timestamp.
            items: Lines to record, one per deleted path.

        Raises:
            OSError: If the log file cannot be opened or written.
        """
        if not items:
            return

        lines = [f"{header} {format_timestamp(self._clock())}", SEPARATOR]
        lines.extend(f"{ITEM_INDENT}{item}" for item in items)
        lines.extend([SEPARATOR, "", ""])

        with open(log_file_path, "a", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")

        logger.debug("Logged %d item(s) to %s", len(items), log_file_path)
