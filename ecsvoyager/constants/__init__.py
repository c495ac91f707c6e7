"""Constants module for ECS Voyager.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, glyphs with Final)
- timeouts.py: Interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in ecsvoyager.keyboard module.
"""

from ecsvoyager.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    DEFAULT_VIEW_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from ecsvoyager.constants.enums import (
    LaunchType,
    LogLevel,
    MetricsTimeRange,
    ModalKind,
    SearchMode,
    ServiceStatus,
    TaskStatus,
    View,
)
from ecsvoyager.constants.limits import REFRESH_INTERVAL_MIN
from ecsvoyager.constants.timeouts import (
    LOG_TAIL_REFRESH_INTERVAL,
    LOOP_TICK_INTERVAL,
    REFRESH_PAUSE_COOLDOWN,
)
from ecsvoyager.constants.values import APP_TITLE, APP_VERSION

__all__ = [
    # Application
    "APP_TITLE",
    "APP_VERSION",
    # Defaults
    "AUTO_REFRESH_DEFAULT",
    "DEFAULT_VIEW_DEFAULT",
    # Timeouts
    "LOG_TAIL_REFRESH_INTERVAL",
    "LOOP_TICK_INTERVAL",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "REFRESH_PAUSE_COOLDOWN",
    # Enums
    "LaunchType",
    "LogLevel",
    "MetricsTimeRange",
    "ModalKind",
    "SearchMode",
    "ServiceStatus",
    "TaskStatus",
    "View",
]
