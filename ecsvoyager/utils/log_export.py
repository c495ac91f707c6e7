"""Write the currently visible log entries to a timestamped text file."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ecsvoyager.models.logs.log_entry import LogEntry

logger = logging.getLogger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def export_file_name(label: str, now: datetime) -> str:
    safe_label = _UNSAFE_CHARS_RE.sub("_", label).strip("_") or "logs"
    return f"logs_{safe_label}_{now:%Y%m%d_%H%M%S}.txt"


def export_logs(
    entries: Iterable[LogEntry],
    directory: Path,
    label: str,
    now: datetime | None = None,
) -> Path:
    """Serialize ``entries`` one line each and return the written path.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_file_name(label, now or datetime.now())
    lines = [entry.to_line() for entry in entries]
    path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
    logger.info("Exported %d log entries to %s", len(lines), path)
    return path


__all__ = ["export_file_name", "export_logs"]
