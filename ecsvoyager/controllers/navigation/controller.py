"""Navigation controller - the dashboard state machine.

Owns the current/previous view, the modal slot and the selection cursor,
and orchestrates the filter engine, refresh scheduler and log viewer from
event-handler callbacks. All state lives in the injected ``DashboardState``.

Every provider call is awaited inside the handler that triggered it, so
state is only ever mutated from the single UI loop. User-initiated calls
propagate ``VoyagerError`` to the caller; scheduled refreshes swallow and
report them on the status line.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

from ecsvoyager.constants.enums import (
    LaunchType,
    MetricsTimeRange,
    ModalKind,
    SearchMode,
    ServiceStatus,
    TaskStatus,
    View,
    cycle_member,
    cycle_optional,
)
from ecsvoyager.constants.limits import DESIRED_COUNT_MAX, PORT_MAX, PORT_MIN
from ecsvoyager.constants.values import AWS_REGIONS
from ecsvoyager.controllers.base.base_controller import DataProvider
from ecsvoyager.controllers.logs.log_stream import LogStreamView
from ecsvoyager.errors import ValidationError, VoyagerError
from ecsvoyager.models.core.resource_info import DescribeResult
from ecsvoyager.models.state.app_settings import AppSettings
from ecsvoyager.models.state.dashboard_state import (
    DashboardState,
    ModalState,
    RefreshState,
)
from ecsvoyager.utils.filtering import FieldSelector, compile_matcher, filter_records
from ecsvoyager.utils.log_export import export_logs
from ecsvoyager.utils.metrics_layout import metrics_lines
from ecsvoyager.utils.scheduler import RefreshScheduler

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Static parent of each view. ResourceDetail returns to whichever list opened it.
VIEW_PARENTS: dict[View, View | None] = {
    View.CLUSTER_LIST: None,
    View.SERVICE_LIST: View.CLUSTER_LIST,
    View.TASK_LIST: View.SERVICE_LIST,
    View.RESOURCE_DETAIL: View.TASK_LIST,
    View.LOG_STREAM: View.TASK_LIST,
    View.METRICS_VIEW: View.SERVICE_LIST,
    View.TASK_DEFINITION_LIST: View.CLUSTER_LIST,
    View.TASK_DEFINITION_DETAIL: View.TASK_DEFINITION_LIST,
}

SEARCH_FIELDS: dict[View, tuple[FieldSelector, ...]] = {
    View.CLUSTER_LIST: (),
    View.SERVICE_LIST: ("name", "status", "launch_type"),
    View.TASK_LIST: ("task_id", "status", "desired_status"),
    View.TASK_DEFINITION_LIST: ("family", "arn", "status"),
}

SWITCH_VIEWS: dict[int, View] = {
    1: View.CLUSTER_LIST,
    2: View.SERVICE_LIST,
    3: View.TASK_LIST,
    4: View.TASK_DEFINITION_LIST,
}

_SCROLLING_VIEWS = frozenset(
    {View.RESOURCE_DETAIL, View.TASK_DEFINITION_DETAIL, View.METRICS_VIEW}
)

INVALID_REGEX_PREFIX = "Invalid regex"


class NavigationController:
    """Drives view transitions, selection, search, modals and refreshes."""

    def __init__(
        self,
        provider: DataProvider,
        settings: AppSettings | None = None,
        state: DashboardState | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._provider = provider
        self._settings = settings or AppSettings()
        self._clock = clock
        self._state = state or self._initial_state(self._settings)
        self._scheduler = RefreshScheduler(self._state.refresh)
        self._profiles: list[str] = []
        self._view_refreshers: dict[View, Callable[[], Awaitable[None]]] = {
            View.CLUSTER_LIST: self._refresh_clusters,
            View.SERVICE_LIST: self._refresh_services,
            View.TASK_LIST: self._refresh_tasks,
            View.RESOURCE_DETAIL: self._refresh_nothing,
            View.LOG_STREAM: self._refresh_logs,
            View.METRICS_VIEW: self._refresh_metrics,
            View.TASK_DEFINITION_LIST: self._refresh_task_definitions,
            View.TASK_DEFINITION_DETAIL: self._refresh_nothing,
        }

    @staticmethod
    def _initial_state(settings: AppSettings) -> DashboardState:
        return DashboardState(
            view=settings.initial_view,
            refresh=RefreshState(
                auto_refresh=settings.auto_refresh,
                interval=float(settings.refresh_interval),
            ),
            logs=LogStreamView(settings.log_viewport_height),
            profile=settings.profile,
            region=settings.region,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def scheduler(self) -> RefreshScheduler:
        return self._scheduler

    @property
    def view(self) -> View:
        return self._state.view

    @property
    def selection(self) -> int:
        return self._state.selection

    @property
    def logs(self) -> LogStreamView:
        return self._state.logs

    @property
    def profiles(self) -> list[str]:
        return list(self._profiles)

    # =========================================================================
    # Lists and selection
    # =========================================================================

    def _collection(self, view: View) -> list[Any] | None:
        collections: dict[View, list[Any]] = {
            View.CLUSTER_LIST: self._state.clusters,
            View.SERVICE_LIST: self._state.services,
            View.TASK_LIST: self._state.tasks,
            View.TASK_DEFINITION_LIST: self._state.task_definitions,
        }
        return collections.get(view)

    def _predicates(self, view: View) -> dict[str, str | None]:
        filters = self._state.filters
        if view is View.SERVICE_LIST:
            return {"status": filters.service_status, "launch_type": filters.launch_type}
        if view is View.TASK_LIST:
            return {"status": filters.task_status}
        return {}

    def filtered_items(self, view: View | None = None) -> list[Any]:
        """Current list after the text query and categorical predicates."""
        view = view or self._state.view
        items = self._collection(view)
        if items is None:
            return []
        filters = self._state.filters
        return filter_records(
            items,
            query=filters.query,
            regex_mode=filters.regex_mode,
            fields=SEARCH_FIELDS[view],
            predicates=self._predicates(view),
        )

    def selected_item(self) -> Any | None:
        items = self.filtered_items()
        if 0 <= self._state.selection < len(items):
            return items[self._state.selection]
        return None

    def _clamp_selection(self) -> None:
        if self._state.selection >= len(self.filtered_items()):
            self._state.selection = 0

    def select_next(self) -> None:
        """Move down: wrap in lists, scroll (saturating) elsewhere."""
        self._move(1)

    def select_previous(self) -> None:
        """Move up: wrap in lists, scroll (saturating) elsewhere."""
        self._move(-1)

    def _move(self, delta: int) -> None:
        # Scrolling defers background refreshes for one cooldown
        self._scheduler.pause(self._clock())
        view = self._state.view

        if view.is_list:
            count = len(self.filtered_items())
            if count:
                self._state.selection = (self._state.selection + delta) % count
            return

        if view is View.LOG_STREAM:
            if not self._state.logs.filtered():
                return
            if delta > 0:
                self._state.logs.scroll_down(delta)
            else:
                self._state.logs.scroll_up(-delta)
            return

        if view in _SCROLLING_VIEWS:
            limit = self._scroll_limit()
            self._state.detail_scroll = max(0, min(self._state.detail_scroll + delta, limit))

    def _scroll_limit(self) -> int:
        state = self._state
        if state.view is View.METRICS_VIEW:
            lines = metrics_lines(
                state.metrics, state.selected_service, state.time_range, self._settings
            )
            return max(0, len(lines) - 1)
        return max(0, len(self.detail_text().splitlines()) - 1)

    # =========================================================================
    # View transitions
    # =========================================================================

    def enter(self, view: View) -> None:
        """Switch views, remembering the current one as previous."""
        state = self._state
        logger.debug("View transition %s -> %s", state.view.value, view.value)
        state.previous_view = state.view
        state.view = view
        state.selection = 0
        state.detail_scroll = 0
        state.filters.query = ""
        state.search_mode = SearchMode.NONE

    def parent_of(self, view: View) -> View | None:
        if view is View.RESOURCE_DETAIL:
            return self._state.detail_origin or VIEW_PARENTS[view]
        return VIEW_PARENTS[view]

    def back(self) -> bool:
        """Return to the parent view. Returns False at the root."""
        state = self._state
        view = state.view
        parent = self.parent_of(view)
        if parent is None:
            return False

        if view is View.SERVICE_LIST:
            state.selected_service = None
        elif view in (View.RESOURCE_DETAIL, View.TASK_DEFINITION_DETAIL):
            state.details = None
            state.show_json = False
            state.detail_origin = None
        elif view is View.LOG_STREAM:
            state.logs.clear()
        elif view is View.METRICS_VIEW:
            state.metrics = None

        self.enter(parent)
        return True

    async def switch_view(self, number: int) -> None:
        """Jump to one of the top-level lists, loading it if empty."""
        view = SWITCH_VIEWS.get(number)
        if view is None or view is self._state.view:
            return
        self.enter(view)
        if not self._collection(view):
            await self.refresh()

    # =========================================================================
    # Provider calls
    # =========================================================================

    async def _fetch(self, message: str, call: Awaitable[T]) -> T:
        """Await ``call`` with the loading flag raised."""
        state = self._state
        state.loading = True
        state.status_message = message
        started = time.monotonic()
        try:
            return await call
        finally:
            state.loading = False
            logger.debug("%s took %.1f ms", message, (time.monotonic() - started) * 1000)

    async def initialize(self) -> None:
        """Load profiles and the initial view."""
        try:
            self._profiles = await self._provider.list_profiles()
        except VoyagerError as exc:
            logger.warning("Could not list profiles: %s", exc)
            self._profiles = []
        await self.refresh()

    async def confirm(self) -> None:
        """Drill into the selected item of the current list."""
        item = self.selected_item()
        if item is None:
            return
        state = self._state
        view = state.view

        if view is View.CLUSTER_LIST:
            services = await self._fetch(
                f"Loading services for cluster: {item}",
                self._provider.list_services(item),
            )
            state.selected_cluster = item
            state.services = services
            self.enter(View.SERVICE_LIST)
            state.status_message = f"Loaded {len(services)} services"
        elif view is View.SERVICE_LIST:
            cluster = self._require_cluster()
            tasks = await self._fetch(
                f"Loading tasks for service: {item.name}",
                self._provider.list_tasks(cluster, item.name),
            )
            state.selected_service = item.name
            state.tasks = tasks
            self.enter(View.TASK_LIST)
            state.status_message = f"Loaded {len(tasks)} tasks"
        elif view is View.TASK_LIST:
            await self.describe()
        elif view is View.TASK_DEFINITION_LIST:
            details = await self._fetch(
                f"Describing task definition: {item.family}:{item.revision}",
                self._provider.describe_task_definition(item.arn),
            )
            state.selected_task_definition = item
            self._show_details(details, View.TASK_DEFINITION_DETAIL)

    async def describe(self) -> None:
        """Open ResourceDetail for the selected service or task."""
        item = self.selected_item()
        if item is None:
            return
        view = self._state.view
        if view is View.SERVICE_LIST:
            cluster = self._require_cluster()
            details = await self._fetch(
                f"Describing service: {item.name}",
                self._provider.describe_service(cluster, item.name),
            )
        elif view is View.TASK_LIST:
            cluster = self._require_cluster()
            details = await self._fetch(
                f"Describing task: {item.task_id}",
                self._provider.describe_task(cluster, item.task_arn),
            )
            self._state.selected_task = item
        else:
            return
        self._show_details(details, View.RESOURCE_DETAIL)

    def _show_details(self, details: DescribeResult, target: View) -> None:
        state = self._state
        origin = state.view
        state.details = details
        state.show_json = False
        self.enter(target)
        state.detail_origin = origin
        state.status_message = f"{details.title} loaded"

    def detail_text(self) -> str:
        details = self._state.details
        if details is None:
            return ""
        return details.json_text if self._state.show_json else details.formatted

    async def view_logs(self) -> None:
        """Open the log stream for the selected task with auto-tail on."""
        if self._state.view is not View.TASK_LIST:
            return
        task = self.selected_item()
        if task is None:
            return
        cluster = self._require_cluster()
        entries = await self._fetch(
            f"Loading logs for task: {task.task_id}",
            self._provider.get_task_logs(cluster, task.task_arn),
        )
        state = self._state
        state.selected_task = task
        state.logs.clear()
        state.logs.replace_entries(entries)
        self.enter(View.LOG_STREAM)
        state.status_message = f"Loaded {len(entries)} log entries (auto-tail enabled)"

    async def view_metrics(self) -> None:
        """Open the metrics view for the selected service."""
        if self._state.view is not View.SERVICE_LIST:
            return
        service = self.selected_item()
        if service is None:
            return
        cluster = self._require_cluster()
        state = self._state
        metrics = await self._fetch(
            f"Loading metrics for service: {service.name}",
            self._provider.get_service_metrics(cluster, service.name, state.time_range),
        )
        state.selected_service = service.name
        state.metrics = metrics
        self.enter(View.METRICS_VIEW)
        state.status_message = f"Metrics loaded [{state.time_range.label}]"

    async def cycle_time_range(self) -> None:
        state = self._state
        if state.view is not View.METRICS_VIEW or state.selected_service is None:
            return
        next_range = cycle_member(MetricsTimeRange, state.time_range)
        metrics = await self._fetch(
            f"Loading metrics [{next_range.label}]",
            self._provider.get_service_metrics(
                self._require_cluster(), state.selected_service, next_range
            ),
        )
        state.time_range = next_range
        state.metrics = metrics
        state.detail_scroll = 0
        state.status_message = f"Metrics loaded [{next_range.label}]"

    def _require_cluster(self) -> str:
        cluster = self._state.selected_cluster
        if cluster is None:
            raise ValidationError("No cluster selected")
        return cluster

    def _require_writable(self, action: str) -> bool:
        if self._settings.read_only:
            self._state.status_message = f"Read-only mode: {action} is disabled"
            return False
        return True

    async def execute_action(self) -> None:
        """Restart the selected service or stop the selected task."""
        item = self.selected_item()
        if item is None:
            return
        state = self._state
        if state.view is View.SERVICE_LIST:
            if not self._require_writable("restart service"):
                return
            await self._fetch(
                f"Restarting service: {item.name}",
                self._provider.restart_service(self._require_cluster(), item.name),
            )
            await self.refresh()
            state.status_message = f"Service {item.name} restarted"
        elif state.view is View.TASK_LIST:
            if not self._require_writable("stop task"):
                return
            await self._fetch(
                f"Stopping task: {item.task_id}",
                self._provider.stop_task(self._require_cluster(), item.task_arn),
            )
            await self.refresh()
            state.status_message = f"Task {item.task_id} stopped"

    # =========================================================================
    # Refresh
    # =========================================================================

    async def refresh(self) -> None:
        """Manual refresh of the current view. Failures propagate."""
        if self._state.loading:
            return
        self._scheduler.mark_refreshed(self._clock())
        await self._view_refreshers[self._state.view]()

    async def tick(self) -> bool:
        """Run a scheduled refresh if one is due. Never raises.

        Returns:
            True if a refresh was attempted.
        """
        state = self._state
        if state.loading or state.modal.is_open:
            return False
        now = self._clock()
        if not self._scheduler.should_refresh(now, state.view, state.logs.auto_tail):
            return False
        self._scheduler.mark_refreshed(now)
        # Failures keep the stale list on screen
        try:
            await self._view_refreshers[state.view]()
        except VoyagerError as exc:
            logger.warning("Scheduled refresh of %s failed: %s", state.view.value, exc)
            state.status_message = f"Refresh failed: {exc}"
        except Exception as exc:
            logger.exception("Unexpected error refreshing %s", state.view.value)
            state.status_message = f"Refresh failed: {exc}"
        return True

    async def _refresh_clusters(self) -> None:
        clusters = await self._fetch("Refreshing clusters...", self._provider.list_clusters())
        self._state.clusters = clusters
        self._clamp_selection()
        self._state.status_message = f"Loaded {len(clusters)} clusters"

    async def _refresh_services(self) -> None:
        cluster = self._state.selected_cluster
        if cluster is None:
            self._state.status_message = "Select a cluster first"
            return
        services = await self._fetch(
            "Refreshing services...", self._provider.list_services(cluster)
        )
        self._state.services = services
        self._clamp_selection()
        self._state.status_message = f"Loaded {len(services)} services"

    async def _refresh_tasks(self) -> None:
        cluster = self._state.selected_cluster
        service = self._state.selected_service
        if cluster is None or service is None:
            self._state.status_message = "Select a service first"
            return
        tasks = await self._fetch(
            "Refreshing tasks...", self._provider.list_tasks(cluster, service)
        )
        self._state.tasks = tasks
        self._clamp_selection()
        self._state.status_message = f"Loaded {len(tasks)} tasks"

    async def _refresh_task_definitions(self) -> None:
        definitions = await self._fetch(
            "Refreshing task definitions...", self._provider.list_task_definitions()
        )
        self._state.task_definitions = definitions
        self._clamp_selection()
        self._state.status_message = f"Loaded {len(definitions)} task definitions"

    async def _refresh_logs(self) -> None:
        cluster = self._state.selected_cluster
        task = self._state.selected_task
        if cluster is None or task is None:
            return
        entries = await self._fetch(
            "Refreshing logs...", self._provider.get_task_logs(cluster, task.task_arn)
        )
        self._state.logs.replace_entries(entries)
        self._state.status_message = f"Loaded {len(entries)} log entries"

    async def _refresh_metrics(self) -> None:
        state = self._state
        if state.selected_cluster is None or state.selected_service is None:
            return
        state.metrics = await self._fetch(
            "Refreshing metrics...",
            self._provider.get_service_metrics(
                state.selected_cluster, state.selected_service, state.time_range
            ),
        )
        state.status_message = f"Metrics loaded [{state.time_range.label}]"

    async def _refresh_nothing(self) -> None:
        return None

    # =========================================================================
    # Search
    # =========================================================================

    def begin_search(self) -> None:
        """Start list search in list views or log search in the log view."""
        state = self._state
        if state.view is View.LOG_STREAM:
            if state.search_mode is SearchMode.LIST:
                self._cancel_list_search()
            state.search_mode = SearchMode.LOG
            state.logs.set_text_filter("")
        elif state.view.is_list:
            if state.search_mode is SearchMode.LOG:
                state.logs.set_text_filter("")
            state.search_mode = SearchMode.LIST
            state.filters.query = ""
            state.selection = 0

    def update_search(self, char: str) -> None:
        state = self._state
        if state.search_mode is SearchMode.LIST:
            state.filters.query += char
            state.selection = 0
            self._report_pattern_error()
        elif state.search_mode is SearchMode.LOG:
            state.logs.set_text_filter(state.logs.text_filter + char)

    def delete_search_char(self) -> None:
        state = self._state
        if state.search_mode is SearchMode.LIST:
            state.filters.query = state.filters.query[:-1]
            state.selection = 0
            self._report_pattern_error()
        elif state.search_mode is SearchMode.LOG:
            state.logs.set_text_filter(state.logs.text_filter[:-1])

    def end_search(self) -> None:
        """Stop capturing input and keep the query applied."""
        self._state.search_mode = SearchMode.NONE

    def cancel_search(self) -> None:
        """Stop capturing input and drop the query."""
        state = self._state
        if state.search_mode is SearchMode.LOG:
            state.logs.set_text_filter("")
        else:
            self._cancel_list_search()
        state.search_mode = SearchMode.NONE

    def clear_search(self) -> None:
        """Drop an applied list query outside of search mode."""
        self._cancel_list_search()

    def _cancel_list_search(self) -> None:
        self._state.filters.query = ""
        self._state.selection = 0

    def _report_pattern_error(self) -> None:
        state = self._state
        filters = state.filters
        error = None
        if filters.regex_mode and filters.query:
            error = compile_matcher(filters.query, regex_mode=True).error
        if error:
            state.status_message = f"{INVALID_REGEX_PREFIX} ({error}); matching literally"
        elif state.status_message.startswith(INVALID_REGEX_PREFIX):
            state.status_message = ""

    # =========================================================================
    # Categorical filters
    # =========================================================================

    def cycle_service_status_filter(self) -> None:
        filters = self._state.filters
        filters.service_status = cycle_optional(
            [status.value for status in ServiceStatus], filters.service_status
        )
        self._after_filter_change("Status filter", filters.service_status)

    def cycle_launch_type_filter(self) -> None:
        filters = self._state.filters
        filters.launch_type = cycle_optional(
            [launch.value for launch in LaunchType], filters.launch_type
        )
        self._after_filter_change("Launch type filter", filters.launch_type)

    def cycle_task_status_filter(self) -> None:
        filters = self._state.filters
        filters.task_status = cycle_optional(
            [status.value for status in TaskStatus], filters.task_status
        )
        self._after_filter_change("Task status filter", filters.task_status)

    def clear_filters(self) -> None:
        self._state.filters.clear()
        self._state.search_mode = SearchMode.NONE
        self._state.selection = 0
        self._state.status_message = "All filters cleared"

    def toggle_regex_mode(self) -> None:
        filters = self._state.filters
        filters.regex_mode = not filters.regex_mode
        self._after_filter_change("Regex mode", "on" if filters.regex_mode else "off")
        self._report_pattern_error()

    def cycle_log_level_filter(self) -> None:
        level = self._state.logs.cycle_level_filter()
        label = level.value if level is not None else "all"
        self._state.status_message = f"Log level filter: {label}"

    def _after_filter_change(self, name: str, value: str | None) -> None:
        self._state.selection = 0
        self._state.status_message = f"{name}: {value or 'all'}"

    # =========================================================================
    # Toggles
    # =========================================================================

    def toggle_auto_tail(self) -> None:
        enabled = self._state.logs.toggle_auto_tail()
        self._state.status_message = f"Auto-tail {'enabled' if enabled else 'disabled'}"

    def toggle_json_view(self) -> None:
        state = self._state
        if state.view not in (View.RESOURCE_DETAIL, View.TASK_DEFINITION_DETAIL):
            return
        state.show_json = not state.show_json
        state.detail_scroll = 0
        state.status_message = f"{'JSON' if state.show_json else 'Formatted'} view"

    def toggle_help(self) -> None:
        self._state.show_help = not self._state.show_help

    def report_error(self, error: BaseException) -> None:
        """Show a failure on the status line."""
        self._state.loading = False
        self._state.status_message = f"Error: {error}"

    # =========================================================================
    # Log export
    # =========================================================================

    def export_logs(self, now: datetime | None = None) -> Path | None:
        """Write the filtered log entries to the export directory.

        Failures end up on the status line.
        """
        state = self._state
        task = state.selected_task
        label = task.task_id if task is not None else "logs"
        try:
            path = export_logs(
                state.logs.filtered(), Path(self._settings.export_path), label, now
            )
        except OSError as exc:
            logger.warning("Log export failed: %s", exc)
            state.status_message = f"Export failed: {exc}"
            return None
        state.status_message = f"Logs exported to: {path}"
        return path

    # =========================================================================
    # Modals
    # =========================================================================

    def open_modal(self, kind: ModalKind) -> None:
        """Open ``kind``, discarding any modal already open."""
        state = self._state
        if kind is ModalKind.NONE:
            self.close_modal()
            return

        if kind is ModalKind.PROFILE_SELECTOR:
            options = self._profiles or [state.profile or "default"]
            modal = ModalState(kind=kind, title="Select AWS Profile", options=options)
            if state.profile in options:
                modal.cursor = options.index(state.profile)
        elif kind is ModalKind.REGION_SELECTOR:
            options = list(AWS_REGIONS)
            modal = ModalState(kind=kind, title="Select AWS Region", options=options)
            if state.region in options:
                modal.cursor = options.index(state.region)
        elif kind is ModalKind.SERVICE_EDITOR:
            service = self.selected_item() if state.view is View.SERVICE_LIST else None
            if service is None:
                raise ValidationError("Select a service to edit")
            modal = ModalState(
                kind=kind,
                title=f"Edit service: {service.name}",
                fields={"desired_count": str(service.desired_count)},
                target=service.name,
                target_label=service.name,
            )
        else:
            task = self.selected_item() if state.view is View.TASK_LIST else None
            if task is None:
                raise ValidationError("Select a task for port forwarding")
            modal = ModalState(
                kind=kind,
                title=f"Port forwarding: {task.task_id}",
                fields={"local_port": "", "remote_port": ""},
                target=task.task_arn,
                target_label=task.task_id,
            )
        state.modal = modal

    def close_modal(self) -> None:
        self._state.modal = ModalState()

    def modal_next(self) -> None:
        self._modal_step(1)

    def modal_previous(self) -> None:
        self._modal_step(-1)

    def _modal_step(self, delta: int) -> None:
        modal = self._state.modal
        if modal.kind.is_selector and modal.options:
            modal.cursor = (modal.cursor + delta) % len(modal.options)
        elif modal.fields:
            modal.focus = (modal.focus + delta) % len(modal.fields)

    def modal_input(self, char: str) -> None:
        modal = self._state.modal
        name = modal.focused_field
        if name is not None:
            modal.fields[name] += char

    def modal_delete_char(self) -> None:
        modal = self._state.modal
        name = modal.focused_field
        if name is not None:
            modal.fields[name] = modal.fields[name][:-1]

    async def modal_confirm(self) -> None:
        """Apply the open modal. Invalid input keeps the modal open."""
        modal = self._state.modal
        kind = modal.kind

        if kind is ModalKind.NONE:
            return
        if kind.is_selector:
            choice = modal.options[modal.cursor] if modal.options else None
            self.close_modal()
            if choice is None:
                return
            if kind is ModalKind.PROFILE_SELECTOR:
                await self._switch_context(profile=choice, region=None)
            else:
                await self._switch_context(profile=None, region=choice)
        elif kind is ModalKind.SERVICE_EDITOR:
            await self._apply_service_edit(modal)
        else:
            await self._apply_port_forwarding(modal)

    async def _switch_context(self, profile: str | None, region: str | None) -> None:
        await self._fetch(
            "Switching context...", self._provider.switch_context(profile, region)
        )
        state = self._state
        if profile is not None:
            state.profile = profile
        if region is not None:
            state.region = region
        state.clusters = []
        state.services = []
        state.tasks = []
        state.task_definitions = []
        state.selected_cluster = None
        state.selected_service = None
        state.selected_task = None
        state.details = None
        state.metrics = None
        state.logs.clear()
        self.enter(View.CLUSTER_LIST)
        await self.refresh()

    async def _apply_service_edit(self, modal: ModalState) -> None:
        count = parse_int_field(
            modal.fields.get("desired_count", ""), "Desired count", 0, DESIRED_COUNT_MAX
        )
        if not self._require_writable("update service"):
            return
        service = modal.target
        if service is None:
            self.close_modal()
            return
        await self._fetch(
            f"Updating service: {service}",
            self._provider.update_service(self._require_cluster(), service, count),
        )
        self.close_modal()
        await self.refresh()
        self._state.status_message = f"Service {service} desired count set to {count}"

    async def _apply_port_forwarding(self, modal: ModalState) -> None:
        local_port = parse_int_field(
            modal.fields.get("local_port", ""), "Local port", PORT_MIN, PORT_MAX
        )
        remote_port = parse_int_field(
            modal.fields.get("remote_port", ""), "Remote port", PORT_MIN, PORT_MAX
        )
        task_arn = modal.target
        if task_arn is None:
            self.close_modal()
            return
        task_id = modal.target_label
        session = await self._fetch(
            f"Starting port forwarding for task: {task_id}",
            self._provider.start_port_forwarding(
                self._require_cluster(), task_arn, local_port, remote_port
            ),
        )
        self.close_modal()
        self._state.status_message = (
            f"Forwarding localhost:{local_port} -> {task_id}:{remote_port} ({session})"
        )


def parse_int_field(raw: str, label: str, minimum: int, maximum: int) -> int:
    """Parse a numeric modal field.

    Raises:
        ValidationError: If ``raw`` is not an integer within bounds.
    """
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(f"{label} must be a number, got {raw!r}")
    value = int(text)
    if not minimum <= value <= maximum:
        raise ValidationError(f"{label} must be between {minimum} and {maximum}")
    return value


__all__ = [
    "SEARCH_FIELDS",
    "SWITCH_VIEWS",
    "VIEW_PARENTS",
    "NavigationController",
    "parse_int_field",
]
