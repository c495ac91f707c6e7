"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "ECS Voyager"
APP_VERSION: Final = "0.4.0"

# ============================================================================
# Status line messages
# ============================================================================

STATUS_READY: Final = "Ready"
STATUS_NO_DATA: Final = "No data available"
NO_SELECTION: Final = "-"

# ============================================================================
# Chart glyphs
# ============================================================================

CHART_FILL_CHAR: Final = "█"  # full block
CHART_EMPTY_CHAR: Final = " "
CHART_AXIS_CORNER: Final = "└"  # box drawing up-right
CHART_AXIS_RULE: Final = "─"  # box drawing horizontal
SPARKLINE_CHARS: Final = "▁▂▃▄▅▆▇█"

# ============================================================================
# Spinner frames shown while a fetch is outstanding
# ============================================================================

SPINNER_FRAMES: Final = ("|", "/", "-", "\\")

# ============================================================================
# Selector modal options
# ============================================================================

AWS_REGIONS: Final = (
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "eu-west-1",
    "eu-west-2",
    "eu-central-1",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-northeast-1",
)

__all__ = [
    "APP_TITLE",
    "APP_VERSION",
    "AWS_REGIONS",
    "CHART_AXIS_CORNER",
    "CHART_AXIS_RULE",
    "CHART_EMPTY_CHAR",
    "CHART_FILL_CHAR",
    "NO_SELECTION",
    "SPARKLINE_CHARS",
    "SPINNER_FRAMES",
    "STATUS_NO_DATA",
    "STATUS_READY",
]
