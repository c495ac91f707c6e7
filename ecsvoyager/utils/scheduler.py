"""Auto-refresh scheduling decisions.

The scheduler is polled once per run-loop tick; it never owns a timer. All
times are monotonic seconds supplied by the caller, which keeps every
decision a pure function of ``RefreshState`` and ``now``.
"""

from __future__ import annotations

import logging

from ecsvoyager.constants.enums import View
from ecsvoyager.constants.timeouts import (
    LOG_TAIL_REFRESH_INTERVAL,
    REFRESH_PAUSE_COOLDOWN,
)
from ecsvoyager.models.state.dashboard_state import RefreshState

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Decide when the current view should be refreshed in the background."""

    def __init__(
        self,
        state: RefreshState,
        cooldown: float = REFRESH_PAUSE_COOLDOWN,
        log_tail_interval: float = LOG_TAIL_REFRESH_INTERVAL,
    ) -> None:
        self._state = state
        self._cooldown = cooldown
        self._log_tail_interval = log_tail_interval

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def cooldown(self) -> float:
        return self._cooldown

    def effective_interval(self, view: View, auto_tail: bool) -> float:
        """Short interval while tailing logs, configured interval otherwise."""
        if view is View.LOG_STREAM and auto_tail:
            return self._log_tail_interval
        return self._state.interval

    def is_paused(self, now: float) -> bool:
        """Whether a pause is still inside its cooldown window.

        Expiry is implicit: no resume call is needed.
        """
        paused_at = self._state.paused_at
        return paused_at is not None and now < paused_at + self._cooldown

    def should_refresh(self, now: float, view: View, auto_tail: bool = False) -> bool:
        """Return True when a scheduled refresh is due."""
        if not self._state.auto_refresh:
            return False
        if self.is_paused(now):
            return False
        elapsed = now - self._state.last_refresh
        return elapsed > self.effective_interval(view, auto_tail)

    def pause(self, now: float) -> None:
        """Suppress scheduled refreshes for one cooldown starting at ``now``."""
        self._state.paused_at = now

    def mark_refreshed(self, now: float) -> None:
        """Record a refresh and lift any pause."""
        self._state.last_refresh = now
        self._state.paused_at = None

    def set_auto_refresh(self, enabled: bool) -> None:
        self._state.auto_refresh = enabled
        logger.debug("Auto-refresh %s", "enabled" if enabled else "disabled")


__all__ = ["RefreshScheduler"]
