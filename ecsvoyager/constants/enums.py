"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Navigation Enums
# =============================================================================

class View(Enum):
    """Top-level screens of the dashboard."""

    CLUSTER_LIST = "clusters"
    SERVICE_LIST = "services"
    TASK_LIST = "tasks"
    RESOURCE_DETAIL = "details"
    LOG_STREAM = "logs"
    METRICS_VIEW = "metrics"
    TASK_DEFINITION_LIST = "task_definitions"
    TASK_DEFINITION_DETAIL = "task_definition_detail"

    @property
    def is_list(self) -> bool:
        """Whether the view shows a selectable list."""
        return self in LIST_VIEWS

    @property
    def title(self) -> str:
        return _VIEW_TITLES[self]


LIST_VIEWS = frozenset(
    {
        View.CLUSTER_LIST,
        View.SERVICE_LIST,
        View.TASK_LIST,
        View.TASK_DEFINITION_LIST,
    }
)

_VIEW_TITLES = {
    View.CLUSTER_LIST: "Clusters",
    View.SERVICE_LIST: "Services",
    View.TASK_LIST: "Tasks",
    View.RESOURCE_DETAIL: "Details",
    View.LOG_STREAM: "Logs",
    View.METRICS_VIEW: "Metrics",
    View.TASK_DEFINITION_LIST: "Task Definitions",
    View.TASK_DEFINITION_DETAIL: "Task Definition",
}


class ModalKind(Enum):
    """Single-slot overlay kinds."""

    NONE = "none"
    PROFILE_SELECTOR = "profile_selector"
    REGION_SELECTOR = "region_selector"
    SERVICE_EDITOR = "service_editor"
    PORT_FORWARDING_SETUP = "port_forwarding_setup"

    @property
    def is_selector(self) -> bool:
        return self in (ModalKind.PROFILE_SELECTOR, ModalKind.REGION_SELECTOR)


class SearchMode(Enum):
    """Which text input, if any, is capturing keystrokes."""

    NONE = "none"
    LIST = "list"
    LOG = "log"


# =============================================================================
# Filter Enums
# =============================================================================

class ServiceStatus(Enum):
    """ECS service status values."""

    ACTIVE = "ACTIVE"
    DRAINING = "DRAINING"
    INACTIVE = "INACTIVE"


class LaunchType(Enum):
    """ECS launch types."""

    FARGATE = "FARGATE"
    EC2 = "EC2"
    EXTERNAL = "EXTERNAL"


class TaskStatus(Enum):
    """ECS task last-status values used for filtering."""

    RUNNING = "RUNNING"
    PENDING = "PENDING"
    STOPPED = "STOPPED"


class LogLevel(Enum):
    """Log levels inferred from log messages, most severe first."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"


# =============================================================================
# Metrics Enums
# =============================================================================

class MetricsTimeRange(Enum):
    """Time windows for service metrics, valued in minutes."""

    ONE_HOUR = 60
    SIX_HOURS = 360
    ONE_DAY = 1440
    SEVEN_DAYS = 10080

    @property
    def label(self) -> str:
        return _TIME_RANGE_LABELS[self]

    @property
    def minutes(self) -> int:
        return self.value


_TIME_RANGE_LABELS = {
    MetricsTimeRange.ONE_HOUR: "1h",
    MetricsTimeRange.SIX_HOURS: "6h",
    MetricsTimeRange.ONE_DAY: "24h",
    MetricsTimeRange.SEVEN_DAYS: "7d",
}


# =============================================================================
# Application State Enums
# =============================================================================

def cycle_optional(members: list, current):
    """Step through ``[None, *members]`` and wrap back to ``None``."""
    order = [None, *members]
    index = order.index(current) if current in order else 0
    return order[(index + 1) % len(order)]


def cycle_member(enum_cls, current):
    """Return the member after ``current`` in definition order, wrapping."""
    members = list(enum_cls)
    return members[(members.index(current) + 1) % len(members)]
