"""Log models."""

from ecsvoyager.models.logs.log_entry import LogEntry

__all__ = ["LogEntry"]
