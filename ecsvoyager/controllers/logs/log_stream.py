"""Windowing and auto-tail logic for the log viewer.

The canonical collection is replaced wholesale on every refresh (sorted by
timestamp, never merged or deduplicated). Level and text filters only derive
a view over it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ecsvoyager.constants.defaults import LOG_VIEWPORT_HEIGHT_DEFAULT
from ecsvoyager.constants.enums import LogLevel, cycle_optional
from ecsvoyager.models.logs.log_entry import LogEntry
from ecsvoyager.utils.filtering import filter_records

logger = logging.getLogger(__name__)

_LOG_SEARCH_FIELDS = ("message", "source")


class LogStreamView:
    """Log buffer with a scroll window that can pin itself to the tail."""

    def __init__(self, viewport_height: int = LOG_VIEWPORT_HEIGHT_DEFAULT) -> None:
        self._entries: list[LogEntry] = []
        self.scroll_offset = 0
        self.auto_tail = True
        self.viewport_height = max(1, viewport_height)
        self.level_filter: LogLevel | None = None
        self.text_filter = ""

    # =========================================================================
    # Collection
    # =========================================================================

    @property
    def entries(self) -> list[LogEntry]:
        """Canonical collection (copy)."""
        return list(self._entries)

    def replace_entries(self, entries: Iterable[LogEntry]) -> None:
        """Swap in a freshly fetched collection.

        Under auto-tail the window snaps to the newest entries; otherwise the
        offset is clamped so it never points past the end.
        """
        self._entries = sorted(entries, key=lambda entry: entry.timestamp)
        if self.auto_tail:
            self.scroll_offset = self._max_start()
        else:
            self.scroll_offset = min(self.scroll_offset, self._max_start())
        logger.debug("Log buffer replaced with %d entries", len(self._entries))

    def clear(self) -> None:
        """Empty the buffer and return to tail mode."""
        self._entries = []
        self.scroll_offset = 0
        self.auto_tail = True
        self.level_filter = None
        self.text_filter = ""

    # =========================================================================
    # Filters
    # =========================================================================

    def filtered(self) -> list[LogEntry]:
        """Entries passing the level and text filters, in timestamp order."""
        entries = self._entries
        if self.level_filter is not None:
            entries = [entry for entry in entries if entry.level is self.level_filter]
        if self.text_filter:
            entries = filter_records(
                entries, self.text_filter, regex_mode=False, fields=_LOG_SEARCH_FIELDS
            )
        return list(entries)

    def cycle_level_filter(self) -> LogLevel | None:
        self.level_filter = cycle_optional(list(LogLevel), self.level_filter)
        self._after_filter_change()
        return self.level_filter

    def set_text_filter(self, text: str) -> None:
        self.text_filter = text
        self._after_filter_change()

    def _after_filter_change(self) -> None:
        self.scroll_offset = self._max_start() if self.auto_tail else 0

    # =========================================================================
    # Windowing
    # =========================================================================

    def _max_start(self, count: int | None = None) -> int:
        total = len(self.filtered()) if count is None else count
        return max(0, total - self.viewport_height)

    def window_start(self) -> int:
        max_start = self._max_start()
        if self.auto_tail:
            return max_start
        return min(self.scroll_offset, max_start)

    def window(self) -> list[LogEntry]:
        """Visible slice of the filtered entries."""
        entries = self.filtered()
        start = self.window_start()
        return entries[start:start + self.viewport_height]

    def set_viewport_height(self, height: int) -> None:
        self.viewport_height = max(1, height)
        if self.auto_tail:
            self.scroll_offset = self._max_start()

    # =========================================================================
    # Scrolling
    # =========================================================================

    def scroll_down(self, lines: int = 1) -> None:
        """Manual scroll towards newer entries. Disables auto-tail."""
        start = self.window_start()
        self.auto_tail = False
        self.scroll_offset = min(start + lines, self._max_start())

    def scroll_up(self, lines: int = 1) -> None:
        """Manual scroll towards older entries. Disables auto-tail."""
        start = self.window_start()
        self.auto_tail = False
        self.scroll_offset = max(0, start - lines)

    def set_auto_tail(self, enabled: bool) -> None:
        # Keep the current window in place when leaving tail mode
        self.scroll_offset = self.window_start()
        self.auto_tail = enabled
        if enabled:
            self.scroll_offset = self._max_start()

    def toggle_auto_tail(self) -> bool:
        self.set_auto_tail(not self.auto_tail)
        return self.auto_tail


__all__ = ["LogStreamView"]
