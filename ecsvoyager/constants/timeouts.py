"""Timeout and interval constants for the TUI.

All interval values for the run loop tick and refresh cycles, in seconds.
"""

from typing import Final

# ============================================================================
# Run loop
# ============================================================================

# Poll interval for the scheduler tick and spinner animation.
# Not a timeout on provider calls.
LOOP_TICK_INTERVAL: Final = 0.1

# ============================================================================
# Refresh scheduling
# ============================================================================

LOG_TAIL_REFRESH_INTERVAL: Final = 5.0
REFRESH_PAUSE_COOLDOWN: Final = 10.0

__all__ = [
    "LOG_TAIL_REFRESH_INTERVAL",
    "LOOP_TICK_INTERVAL",
    "REFRESH_PAUSE_COOLDOWN",
]
