"""Log viewer state."""

from ecsvoyager.controllers.logs.log_stream import LogStreamView

__all__ = ["LogStreamView"]
