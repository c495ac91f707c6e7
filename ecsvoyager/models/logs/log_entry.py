"""Log entry model."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from pydantic import BaseModel

from ecsvoyager.constants.enums import LogLevel

_LEVEL_RE = re.compile(r"\b(ERROR|WARN(?:ING)?|INFO|DEBUG)\b", re.IGNORECASE)


class LogEntry(BaseModel):
    """A single log line from a task container."""

    timestamp: int  # epoch milliseconds
    message: str
    source: str = ""  # container name

    @property
    def level(self) -> LogLevel | None:
        """Level inferred from the first level token in the message."""
        match = _LEVEL_RE.search(self.message)
        if match is None:
            return None
        token = match.group(1).upper()
        if token.startswith("WARN"):
            return LogLevel.WARN
        return LogLevel(token)

    @property
    def formatted_timestamp(self) -> str:
        moment = datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)
        return moment.strftime("%Y-%m-%d %H:%M:%S")

    def to_line(self) -> str:
        """Plain-text rendering used by the viewer and exports."""
        return f"[{self.formatted_timestamp}] [{self.source}] {self.message}"
