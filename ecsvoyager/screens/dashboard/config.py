"""Dashboard screen configuration - column definitions, widget IDs and help text."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

DASHBOARD_BODY_ID = "dashboard-body"

# Header, search bar, filter bar, status line and borders
CHROME_HEIGHT = 8

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

CLUSTER_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Cluster", 60),
]

SERVICE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 30),
    ("Status", 10),
    ("Desired", 8),
    ("Running", 8),
    ("Pending", 8),
    ("Launch Type", 12),
    ("Task Definition", 30),
]

TASK_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Task ID", 36),
    ("Status", 10),
    ("Desired", 10),
    ("Instance", 20),
    ("CPU", 6),
    ("Memory", 8),
    ("Launch Type", 12),
]

TASK_DEFINITION_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Family", 30),
    ("Revision", 9),
    ("Status", 10),
    ("CPU", 6),
    ("Memory", 8),
    ("ARN", 50),
]

# =============================================================================
# Status colors
# =============================================================================

STATUS_STYLES: dict[str, str] = {
    "ACTIVE": "green",
    "RUNNING": "green",
    "PENDING": "yellow",
    "DRAINING": "yellow",
    "PROVISIONING": "yellow",
    "INACTIVE": "red",
    "STOPPED": "red",
}

LOG_LEVEL_STYLES: dict[str, str] = {
    "ERROR": "bold red",
    "WARN": "yellow",
    "INFO": "cyan",
    "DEBUG": "dim",
}

ALARM_STATE_STYLES: dict[str, str] = {
    "OK": "green",
    "ALARM": "bold red",
    "INSUFFICIENT_DATA": "yellow",
}

# =============================================================================
# Help
# =============================================================================

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("j / Down", "Move down"),
            ("k / Up", "Move up"),
            ("Enter", "Open selected item"),
            ("Esc / h", "Go back"),
            ("1-4", "Clusters, services, tasks, task definitions"),
        ],
    ),
    (
        "Actions",
        [
            ("r", "Refresh"),
            ("d", "Describe"),
            ("l", "View logs (tasks)"),
            ("m", "View metrics (services)"),
            ("x", "Restart service / stop task"),
            ("E", "Edit desired count (services)"),
            ("p", "Port forwarding (tasks)"),
            ("P / R", "Switch profile / region"),
        ],
    ),
    (
        "Filtering",
        [
            ("/", "Search"),
            ("F", "Cycle status filter"),
            ("L", "Cycle launch type filter"),
            ("M", "Toggle regex search"),
            ("C", "Clear all filters"),
        ],
    ),
    (
        "Logs, details and metrics",
        [
            ("t", "Toggle auto-tail"),
            ("f", "Cycle log level filter"),
            ("e", "Export logs"),
            ("J", "Toggle JSON view"),
            ("T", "Cycle metrics time range"),
        ],
    ),
    (
        "General",
        [
            ("?", "Toggle help"),
            ("q", "Quit"),
        ],
    ),
]
