"""Runtime state containers for the dashboard.

The whole mutable state of a running dashboard lives in one
``DashboardState`` value that is handed to the NavigationController.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ecsvoyager.constants.enums import (
    MetricsTimeRange,
    ModalKind,
    SearchMode,
    View,
)
from ecsvoyager.controllers.logs.log_stream import LogStreamView
from ecsvoyager.models.core.resource_info import (
    DescribeResult,
    ServiceRecord,
    TaskDefinitionRecord,
    TaskRecord,
)
from ecsvoyager.models.metrics.chart_series import MetricsSnapshot


@dataclass
class FilterState:
    """Text query plus independent categorical predicates (AND-combined)."""

    query: str = ""
    regex_mode: bool = False
    service_status: str | None = None
    launch_type: str | None = None
    task_status: str | None = None

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.query or self.service_status or self.launch_type or self.task_status
        )

    def clear(self) -> None:
        """Drop the query and every categorical predicate. Regex mode stays."""
        self.query = ""
        self.service_status = None
        self.launch_type = None
        self.task_status = None


@dataclass
class ModalState:
    """Single overlay slot. ``kind == NONE`` means no modal is open."""

    kind: ModalKind = ModalKind.NONE
    title: str = ""
    options: list[str] = field(default_factory=list)
    cursor: int = 0
    fields: dict[str, str] = field(default_factory=dict)
    focus: int = 0
    # Resource the editor acts on, fixed when the modal opens
    target: str | None = None
    target_label: str = ""

    @property
    def is_open(self) -> bool:
        return self.kind is not ModalKind.NONE

    @property
    def focused_field(self) -> str | None:
        names = list(self.fields)
        if not names:
            return None
        return names[self.focus % len(names)]


@dataclass
class RefreshState:
    """Bookkeeping for the auto-refresh scheduler (monotonic seconds)."""

    last_refresh: float = 0.0
    auto_refresh: bool = True
    interval: float = 30.0
    paused_at: float | None = None


@dataclass
class DashboardState:
    """Everything the controller mutates and the presenter reads."""

    view: View = View.CLUSTER_LIST
    previous_view: View | None = None
    detail_origin: View | None = None

    selection: int = 0
    detail_scroll: int = 0

    modal: ModalState = field(default_factory=ModalState)
    search_mode: SearchMode = SearchMode.NONE
    filters: FilterState = field(default_factory=FilterState)
    refresh: RefreshState = field(default_factory=RefreshState)

    # Canonical collections, replaced wholesale on every fetch
    clusters: list[str] = field(default_factory=list)
    services: list[ServiceRecord] = field(default_factory=list)
    tasks: list[TaskRecord] = field(default_factory=list)
    task_definitions: list[TaskDefinitionRecord] = field(default_factory=list)
    logs: LogStreamView = field(default_factory=LogStreamView)

    selected_cluster: str | None = None
    selected_service: str | None = None
    selected_task: TaskRecord | None = None
    selected_task_definition: TaskDefinitionRecord | None = None

    details: DescribeResult | None = None
    show_json: bool = False
    metrics: MetricsSnapshot | None = None
    time_range: MetricsTimeRange = MetricsTimeRange.ONE_HOUR

    profile: str | None = None
    region: str | None = None

    status_message: str = ""
    loading: bool = False
    show_help: bool = False
