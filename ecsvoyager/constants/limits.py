"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5
PORT_MIN: Final = 1
PORT_MAX: Final = 65535
DESIRED_COUNT_MAX: Final = 1000

# ============================================================================
# Chart limits
# ============================================================================

# Spans narrower than this are rendered against a unit range.
CHART_RANGE_EPSILON: Final = 0.001

__all__ = [
    "CHART_RANGE_EPSILON",
    "DESIRED_COUNT_MAX",
    "PORT_MAX",
    "PORT_MIN",
    "REFRESH_INTERVAL_MIN",
]
