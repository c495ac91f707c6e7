"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Behavior defaults
# ============================================================================

AUTO_REFRESH_DEFAULT: Final = True
REFRESH_INTERVAL_DEFAULT: Final = 30
DEFAULT_VIEW_DEFAULT: Final = "clusters"
READ_ONLY_DEFAULT: Final = False

# ============================================================================
# Display defaults
# ============================================================================

SHOW_CHARTS_DEFAULT: Final = True
SHOW_ALARMS_DEFAULT: Final = True
LOG_VIEWPORT_HEIGHT_DEFAULT: Final = 20
CHART_WIDTH_DEFAULT: Final = 60
CHART_HEIGHT_DEFAULT: Final = 10

# ============================================================================
# Paths
# ============================================================================

EXPORT_PATH_DEFAULT: Final = "./exports"
CONFIG_DIR_NAME: Final = ".ecs-voyager"
CONFIG_FILE_NAME: Final = "config.yaml"

__all__ = [
    "AUTO_REFRESH_DEFAULT",
    "CHART_HEIGHT_DEFAULT",
    "CHART_WIDTH_DEFAULT",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "DEFAULT_VIEW_DEFAULT",
    "EXPORT_PATH_DEFAULT",
    "LOG_VIEWPORT_HEIGHT_DEFAULT",
    "READ_ONLY_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SHOW_ALARMS_DEFAULT",
    "SHOW_CHARTS_DEFAULT",
]
